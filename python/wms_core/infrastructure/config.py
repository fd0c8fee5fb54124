# wms_core/infrastructure/config.py
from __future__ import annotations
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

DEFAULT_DB_REL = Path("data") / "WMSMaster.db"


class WMSConfig:
    """
    统一管理 SQLite / SQLAlchemy 入口。
    未来若迁 PostgreSQL，可在此切换连接串，业务代码零改动。

    in_memory=True 时使用内存库（所有 Session 共享同一连接），主要给测试用。
    """

    def __init__(self, db_path: Optional[str | Path] = None, echo: bool = False, in_memory: bool = False):
        project_root = Path(__file__).resolve().parents[3]   # python/ ← wms_core/ ← infra/ ← THIS
        default_path = project_root / DEFAULT_DB_REL
        self.in_memory = in_memory
        self.db_path: Optional[Path] = None if in_memory else (
            Path(db_path).expanduser() if db_path else default_path
        )

        # SqlAlchemy objects
        if in_memory:
            self.engine = create_engine("sqlite://", echo=echo, future=True,
                                        connect_args={"check_same_thread": False},
                                        poolclass=StaticPool)
        else:
            uri = f"sqlite:///{self.db_path.as_posix()}"
            self.engine = create_engine(uri, echo=echo, future=True,
                                        connect_args={"check_same_thread": False})
        self._SessionLocal = sessionmaker(bind=self.engine, autocommit=False, autoflush=False)

    # --- public API -------------------------------------------------

    def get_session(self) -> Session:
        """SQLAlchemy ORM Session（推荐业务代码用）"""
        self._ensure_file()
        return self._SessionLocal()

    def get_engine(self):
        """直接给 Pandas read_sql / 建表使用"""
        return self.engine

    # --- helpers ----------------------------------------------------

    def _ensure_file(self):
        if self.in_memory:
            return
        if not self.db_path.exists():
            raise FileNotFoundError(f"❌ 数据库文件不存在: {self.db_path}")

    # --- dunder -----------------------------------------------------

    def __repr__(self) -> str:
        if self.in_memory:
            return "<WMSConfig in_memory>"
        return f"<WMSConfig db_path='{self.db_path}'>"
