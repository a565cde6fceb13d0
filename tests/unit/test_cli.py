#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""sizhu 命令行单元测试"""

import json

import pytest

from sizhu_server.cli import build_parser, main


class TestParser:
    def test_chart_arguments(self):
        args = build_parser().parse_args(
            ["chart", "--date", "1987-01-07", "--time", "09:55", "--gender", "male", "--city", "北京"]
        )
        assert args.command == "chart"
        assert args.city == "北京"
        assert args.calendar == "solar"
        assert args.sect is None

    def test_search_needs_four_pillars(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["search", "丙寅", "辛丑", "丙辰"])

    def test_invalid_sect(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["search", "丙寅", "辛丑", "丙辰", "癸巳", "--sect", "3"])


class TestMain:
    def test_validation_error_exit_code(self, capsys):
        code = main(["search", "丙寅", "辛丑", "甲丑", "癸巳"])
        assert code == 2
        assert "错误" in capsys.readouterr().err

    @pytest.mark.slow
    def test_search_prints_json(self, capsys):
        code = main(["search", "丙寅", "辛丑", "丙辰", "癸巳", "--start-year", "1986", "--end-year", "1987"])
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data == [{"year": 1987, "month": 1, "day": 7, "hour": 9, "ganzhi": "丙寅 辛丑 丙辰 癸巳"}]

    @pytest.mark.slow
    def test_chart_prints_json(self, capsys):
        code = main(["chart", "--date", "1987-01-07", "--time", "09:55", "--gender", "male"])
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["chart"]["day"]["stem"] == "丙"
        assert len(data["dayun"]) == 8
