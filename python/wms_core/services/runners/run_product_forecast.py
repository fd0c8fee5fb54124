import argparse
import json
import logging
from pathlib import Path

from wms_core.core.common.params.ParasCenter import ParasCenter
from wms_core.infrastructure.config import WMSConfig
from wms_core.infrastructure.db.init_db import init_db
from wms_core.infrastructure.store.sql import SqlAnalyticsStore
from wms_core.services.forecast_service import ProductForecastService

log = logging.getLogger(__name__)

DEFAULT_PARAMS_YAML = Path(__file__).resolve().parents[2] / "config" / "params.yaml"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print demand forecast / seasonal trends / replenishment for a product")
    parser.add_argument("product_id", type=int)
    parser.add_argument("--months", type=int, default=None, help="forecast horizon in months")
    parser.add_argument("--db", default=None, help="SQLite file (default: data/WMSMaster.db)")
    parser.add_argument("--params", default=str(DEFAULT_PARAMS_YAML), help="params YAML")
    parser.add_argument("--init-db", action="store_true", help="create tables before running")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def run(args: argparse.Namespace) -> dict:
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = WMSConfig(db_path=args.db)
    if args.init_db:
        init_db(config)

    params = ParasCenter.from_yaml(args.params)
    service = ProductForecastService.from_store(SqlAnalyticsStore(config), params)

    log.info(f"🔮 产品 {args.product_id} 预测中... ({config})")
    result = service.summary(args.product_id, args.months)
    return result


def main(argv=None):
    args = build_parser().parse_args(argv)
    result = run(args)
    print(json.dumps(result, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
