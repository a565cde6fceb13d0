#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字反推公历日期

根据四柱干支，在给定年份范围内找出所有对应的公历时刻。
四柱周期不同，逐级筛选：
1. 年：每年取两个日期（立春前的 1 月中旬、年中），任一年柱吻合即保留
2. 月：每月取两个日期，任一的年柱、月柱同时吻合即保留
3. 日：候选月逐日比对日柱
4. 时：候选日逐个时辰比对，并用四柱整体复核

返回全部结果（子时分早晚时可能出现多个），找不到返回空列表。
只保留公历年份落在 [start_year, end_year] 内的结果；
子时归次日（sect=1）时，end_year 12 月 31 日 23 点单独补查。
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import date, timedelta
from typing import Iterator, List, Optional, Tuple

from sizhu_core.calculators.LunarConverter import LunarConverter
from sizhu_core.data.constants import (
    DEFAULT_SEARCH_END_YEAR,
    DEFAULT_SEARCH_MAX_SPAN,
    DEFAULT_SEARCH_START_YEAR,
    DEFAULT_SECT,
    SECT_MERGED_RAT,
)
from sizhu_core.interfaces.calendar_oracle import ICalendarOracle
from sizhu_core.models.chart import MatchedDate
from sizhu_core.validators import validate_pattern, validate_sect, validate_year_window

logger = logging.getLogger(__name__)

# 年柱取样：(月, 日)，1 月中旬还在上一个干支年
YEAR_SAMPLE_DATES: Tuple[Tuple[int, int], ...] = ((1, 15), (6, 1))

# 月柱取样日：节总在每月 4~9 日之间，1 日和 28 日分别落在节前、节后
MONTH_SAMPLE_DAYS: Tuple[int, ...] = (1, 28)

# 时辰起点：0 点早子时，1、3、...、21 点，23 点晚子时
HOUR_STARTS: Tuple[int, ...] = (0,) + tuple(range(1, 24, 2))

# 日柱取样时刻，避开子时
DAY_SAMPLE_HOUR = 12

# 并行反推每段至少的年数，lunar_python 为纯 Python 计算，段太碎只会增加线程切换
MIN_YEARS_PER_CHUNK = 40


class BaziToSolarConverter:
    """八字反推公历日期转换器"""

    def __init__(self, oracle: Optional[ICalendarOracle] = None,
                 start_year: int = DEFAULT_SEARCH_START_YEAR,
                 end_year: int = DEFAULT_SEARCH_END_YEAR,
                 max_span: Optional[int] = DEFAULT_SEARCH_MAX_SPAN):
        self.oracle = oracle or LunarConverter()
        self.start_year = start_year
        self.end_year = end_year
        self.max_span = max_span

    def search(self, pattern, start_year: Optional[int] = None, end_year: Optional[int] = None,
               sect: int = DEFAULT_SECT, cancel_event: Optional[threading.Event] = None) -> List[MatchedDate]:
        """
        反推公历时刻

        Args:
            pattern: 四柱，如 ['丙寅', '辛丑', '丙辰', '癸巳'] 或 {'year': ..., 'month': ..., 'day': ..., 'hour': ...}
            start_year: 起始年份（含），默认 1900
            end_year: 结束年份（含），默认 2050
            sect: 早晚子时流派
            cancel_event: 置位后在下一年开始前停止，返回已找到的结果

        Returns:
            List[MatchedDate]: 按时间排序
        """
        target, start_year, end_year = self._prepare(pattern, start_year, end_year, sect)
        matches = self._search_range(target, start_year, end_year, sect, cancel_event)
        logger.info(f"八字反推 {' '.join(target)} ({start_year}-{end_year}): 找到 {len(matches)} 个结果")
        return matches

    def search_parallel(self, pattern, start_year: Optional[int] = None, end_year: Optional[int] = None,
                        sect: int = DEFAULT_SECT, max_workers: int = 4,
                        cancel_event: Optional[threading.Event] = None) -> List[MatchedDate]:
        """
        按年份分段并行反推，结果合并后排序

        各年份互不相关，分段后直接拼接即可。窗口不足两段时直接在当前线程查。
        """
        target, start_year, end_year = self._prepare(pattern, start_year, end_year, sect)
        chunks = self.plan_chunks(start_year, end_year, max_workers)
        if len(chunks) == 1:
            matches = self._search_range(target, start_year, end_year, sect, cancel_event)
            logger.info(f"八字反推 {' '.join(target)} ({start_year}-{end_year}): 找到 {len(matches)} 个结果")
            return matches

        with ThreadPoolExecutor(max_workers=len(chunks), thread_name_prefix="bazi_search") as executor:
            futures = [
                executor.submit(self._search_range, target, chunk_start, chunk_end, sect, cancel_event)
                for chunk_start, chunk_end in chunks
            ]
            found = {}
            for future in futures:
                for match in future.result():
                    found[match.sort_key()] = match

        matches = [found[key] for key in sorted(found)]
        logger.info(
            f"八字反推(并行 {len(chunks)} 段) {' '.join(target)} ({start_year}-{end_year}): 找到 {len(matches)} 个结果"
        )
        return matches

    @staticmethod
    def plan_chunks(start_year: int, end_year: int, max_workers: int) -> List[Tuple[int, int]]:
        """把 [start_year, end_year] 切成连续的年份段，段数不超过 max_workers，每段至少 MIN_YEARS_PER_CHUNK 年"""
        total_years = end_year - start_year + 1
        chunk_count = max(1, min(max_workers, total_years // MIN_YEARS_PER_CHUNK))
        chunk_size = -(-total_years // chunk_count)
        return [
            (chunk_start, min(chunk_start + chunk_size - 1, end_year))
            for chunk_start in range(start_year, end_year + 1, chunk_size)
        ]

    def _prepare(self, pattern, start_year: Optional[int], end_year: Optional[int],
                 sect: int) -> Tuple[Tuple[str, str, str, str], int, int]:
        target = validate_pattern(pattern)
        validate_sect(sect)
        start_year = self.start_year if start_year is None else start_year
        end_year = self.end_year if end_year is None else end_year
        validate_year_window(start_year, end_year, self.max_span)
        return target, start_year, end_year

    def _search_range(self, target: Tuple[str, str, str, str], start_year: int, end_year: int,
                      sect: int, cancel_event: Optional[threading.Event]) -> List[MatchedDate]:
        found = {}
        candidate_years = 0
        cancelled = False
        for year in range(start_year, end_year + 1):
            if cancel_event is not None and cancel_event.is_set():
                logger.info(f"八字反推已取消，停在 {year} 年")
                cancelled = True
                break
            if not self._year_matches(year, target[0]):
                continue
            candidate_years += 1
            for match in self._search_year(year, target, sect):
                # 1 月 1 日补查出的前一天 23 点可能落在窗口之前
                if start_year <= match.year <= end_year:
                    found[match.sort_key()] = match

        if sect == SECT_MERGED_RAT and not cancelled:
            match = self._last_night_match(end_year, target, sect)
            if match is not None:
                found[match.sort_key()] = match

        logger.debug(f"{start_year}-{end_year} 年柱候选 {candidate_years} 年")
        return [found[key] for key in sorted(found)]

    def _last_night_match(self, year: int, target: Tuple[str, str, str, str], sect: int) -> Optional[MatchedDate]:
        """子时归次日时，12 月 31 日 23 点的日柱属于次年 1 月 1 日，逐日扫描覆盖不到"""
        if self.oracle.pillars(year, 12, 31, 23, 0, sect) != target:
            return None
        return MatchedDate(year=year, month=12, day=31, hour=23, ganzhi=' '.join(target))

    def _year_matches(self, year: int, year_pillar: str) -> bool:
        return any(
            self.oracle.year_pillar(year, month, day) == year_pillar
            for month, day in YEAR_SAMPLE_DATES
        )

    def _month_matches(self, year: int, month: int, year_pillar: str, month_pillar: str) -> bool:
        last_day = self.oracle.days_in_month(year, month)
        for day in MONTH_SAMPLE_DAYS:
            if self.oracle.year_month_pillars(year, month, min(day, last_day)) == (year_pillar, month_pillar):
                return True
        return False

    def _search_year(self, year: int, target: Tuple[str, str, str, str], sect: int) -> Iterator[MatchedDate]:
        year_pillar, month_pillar, day_pillar, _ = target
        for month in range(1, 13):
            if not self._month_matches(year, month, year_pillar, month_pillar):
                continue
            for day in range(1, self.oracle.days_in_month(year, month) + 1):
                pillars = self.oracle.pillars(year, month, day, DAY_SAMPLE_HOUR, 0, sect)
                if pillars[2] != day_pillar:
                    continue
                for moment_date, hour in self._candidate_hours(date(year, month, day), sect):
                    found = self.oracle.pillars(moment_date.year, moment_date.month, moment_date.day, hour, 0, sect)
                    if found == target:
                        yield MatchedDate(
                            year=moment_date.year,
                            month=moment_date.month,
                            day=moment_date.day,
                            hour=hour,
                            ganzhi=' '.join(target),
                        )

    @staticmethod
    def _candidate_hours(civil_day: date, sect: int) -> Iterator[Tuple[date, int]]:
        """
        日柱吻合的那一天要查的时刻

        23 点算次日时（sect=1），前一天 23 点的日柱就是今天的日柱，也要查。
        """
        if sect == SECT_MERGED_RAT:
            yield civil_day - timedelta(days=1), 23
        for hour in HOUR_STARTS:
            yield civil_day, hour


__all__ = ['BaziToSolarConverter', 'HOUR_STARTS']
