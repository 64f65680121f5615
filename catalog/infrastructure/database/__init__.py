from .session import Base, build_engine, create_tables, engine, local_session

__all__ = ["Base", "build_engine", "create_tables", "engine", "local_session"]
