from sqlalchemy.orm import Session
from wms_core.infrastructure.config import WMSConfig


class UnitOfWork:
    """
    Session 生命周期管理：正常退出 commit，异常 rollback。
    外部传入的 session 只提交/回滚，不关闭。
    """

    def __init__(self, config: WMSConfig, session: Session = None):
        self.config = config
        self._external_session = session is not None
        self.session = session or config.get_session()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                self.session.commit()
            else:
                self.session.rollback()
        finally:
            if not self._external_session:
                self.session.close()
