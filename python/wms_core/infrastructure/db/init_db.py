from wms_core.infrastructure.db.models import Base
from wms_core.infrastructure.config import WMSConfig


def init_db(config: WMSConfig):
    """建表（已存在则跳过）"""
    if config.db_path is not None:
        config.db_path.parent.mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(config.get_engine())


if __name__ == "__main__":
    cfg = WMSConfig()
    init_db(cfg)
    print(f"✅ 所有表结构已初始化（如不存在则已创建）: {cfg}")
