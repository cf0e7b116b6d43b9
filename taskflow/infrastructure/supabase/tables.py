"""Datastore table, relation and function names (schema-in-code).

The tables are owned by the hosted datastore; use these constants so names
stay consistent across repositories.
"""

TABLE_TASKS = "tasks"
TABLE_SUBTASKS = "subtasks"
TABLE_CATEGORIES = "categories"
TABLE_PROFILES = "profiles"
TABLE_POMODORO_SESSIONS = "pomodoro_sessions"
TABLE_ACTIVITY_LOG = "activity_log"

RPC_TASK_STATISTICS = "get_task_statistics"

# Select lists with embedded relations
TASK_WITH_RELATIONS = "*, category:categories(*), subtasks(*)"
TASK_WITH_CATEGORY = "*, category:categories(*)"
WITH_TASK_TITLE = "*, task:tasks(title)"
