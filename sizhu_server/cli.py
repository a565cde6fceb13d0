#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命令行工具

sizhu chart  --date 1987-01-07 --time 09:55 --gender male [--city 北京]
sizhu search 丙寅 辛丑 丙辰 癸巳 [--start-year 1985 --end-year 1988]
"""

import argparse
import json
import logging
import sys

from sizhu_core.bazi_logging import LOG_FORMAT
from sizhu_core.calculators.bazi_core_calculator import BaziCoreCalculator
from sizhu_core.calculators.bazi_to_solar import BaziToSolarConverter
from sizhu_core.exceptions import BaziError
from sizhu_server.config.env_config import get_env_config
from sizhu_server.utils.bazi_input_processor import BaziInputProcessor

logger = logging.getLogger(__name__)


def _print_json(data) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def cmd_chart(args) -> int:
    env_config = get_env_config()
    calculator = BaziCoreCalculator(reference_longitude=env_config.reference_longitude)
    moment, longitude, _ = BaziInputProcessor.process_input(
        args.date, args.time, args.calendar, args.city, args.longitude, args.leap,
        oracle=calculator.oracle,
    )
    sect = args.sect if args.sect is not None else env_config.default_sect
    result = calculator.calculate_full(moment, args.gender, longitude, sect)
    _print_json(result.model_dump(mode='json'))
    return 0


def cmd_search(args) -> int:
    env_config = get_env_config()
    converter = BaziToSolarConverter(
        start_year=env_config.search_start_year,
        end_year=env_config.search_end_year,
        max_span=env_config.search_max_span,
    )
    sect = args.sect if args.sect is not None else env_config.default_sect
    matches = converter.search_parallel(
        args.pillars, args.start_year, args.end_year,
        sect=sect, max_workers=args.workers or env_config.search_threads,
    )
    _print_json([match.model_dump() for match in matches])
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sizhu",
        description="四柱排盘 / 八字反推",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用示例:
  sizhu chart --date 1987-01-07 --time 09:55 --gender male --city 北京
  sizhu chart --date 1986-12-08 --time 09:55 --gender female --calendar lunar
  sizhu search 丙寅 辛丑 丙辰 癸巳 --start-year 1985 --end-year 1988
        """
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="输出调试日志")
    subparsers = parser.add_subparsers(dest="command", required=True)

    chart = subparsers.add_parser("chart", help="排盘（含大运流年）")
    chart.add_argument("--date", required=True, help="出生日期 YYYY-MM-DD")
    chart.add_argument("--time", required=True, help="出生时间 HH:MM")
    chart.add_argument("--gender", required=True, choices=["male", "female"], help="性别")
    chart.add_argument("--calendar", default="solar", choices=["solar", "lunar"], help="历法类型 (默认: solar)")
    chart.add_argument("--leap", action="store_true", help="农历闰月")
    chart.add_argument("--city", default=None, help="出生城市（真太阳时）")
    chart.add_argument("--longitude", type=float, default=None, help="出生地经度（优先于城市）")
    chart.add_argument("--sect", type=int, choices=[1, 2], default=None, help="早晚子时流派")
    chart.set_defaults(func=cmd_chart)

    search = subparsers.add_parser("search", help="八字反推公历")
    search.add_argument("pillars", nargs=4, metavar="PILLAR", help="年柱 月柱 日柱 时柱")
    search.add_argument("--start-year", type=int, default=None, help="起始年份")
    search.add_argument("--end-year", type=int, default=None, help="结束年份")
    search.add_argument("--sect", type=int, choices=[1, 2], default=None, help="早晚子时流派")
    search.add_argument("--workers", type=int, default=None, help="并行线程数")
    search.set_defaults(func=cmd_search)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT
    )
    try:
        return args.func(args)
    except BaziError as e:
        logger.debug(f"{e.error_type}: {e.message}")
        print(f"错误: {e.message}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
