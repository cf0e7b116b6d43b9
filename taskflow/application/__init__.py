"""Application layer: interfaces, DTOs, and use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, identity provider).
"""
