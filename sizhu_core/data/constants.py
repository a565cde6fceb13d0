#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
排盘常量表：纳音、十二长生、十神、节气月令、城市经度等
"""

from typing import Dict, List, Tuple

from sizhu_core.data.stems_branches import SIXTY_JIAZI

# 纳音：六十甲子两两一组
_NAYIN_NAMES: List[str] = [
    '海中金', '炉中火', '大林木', '路旁土', '剑锋金',
    '山头火', '涧下水', '城头土', '白蜡金', '杨柳木',
    '泉中水', '屋上土', '霹雳火', '松柏木', '长流水',
    '砂中金', '山下火', '平地木', '壁上土', '金箔金',
    '覆灯火', '天河水', '大驿土', '钗钏金', '桑柘木',
    '大溪水', '沙中土', '天上火', '石榴木', '大海水',
]

NAYIN_MAP: Dict[Tuple[str, str], str] = {
    (ganzhi[0], ganzhi[1]): _NAYIN_NAMES[index // 2] for index, ganzhi in enumerate(SIXTY_JIAZI)
}

# 十二长生（顺序固定）
LIFE_STAGE_NAMES: List[str] = ['长生', '沐浴', '冠带', '临官', '帝旺', '衰', '病', '死', '墓', '绝', '胎', '养']

# 十神
TEN_GOD_NAMES: Dict[str, str] = {
    'bijian': '比肩',
    'jiecai': '劫财',
    'shishen': '食神',
    'shangguan': '伤官',
    'piancai': '偏财',
    'zhengcai': '正财',
    'qisha': '七杀',
    'zhengguan': '正官',
    'pianyin': '偏印',
    'zhengyin': '正印',
}

DAY_MASTER_LABEL = '日主'

# 节气到月令
JIEQI_TO_MONTH_BRANCH: Dict[str, str] = {
    '立春': '寅', '雨水': '寅', '惊蛰': '卯', '春分': '卯',
    '清明': '辰', '谷雨': '辰', '立夏': '巳', '小满': '巳',
    '芒种': '午', '夏至': '午', '小暑': '未', '大暑': '未',
    '立秋': '申', '处暑': '申', '白露': '酉', '秋分': '酉',
    '寒露': '戌', '霜降': '戌', '立冬': '亥', '小雪': '亥',
    '大雪': '子', '冬至': '子', '小寒': '丑', '大寒': '丑',
}

# 真太阳时基准经线（东经120度，北京时间）
REFERENCE_LONGITUDE = 120.0

NO_LOCATION_CITY = '不参考出生地 (北京时间)'

# 主要城市经度（用于真太阳时）
CITY_LONGITUDES: Dict[str, float] = {
    NO_LOCATION_CITY: 120.0,
    '北京': 116.46,
    '上海': 121.48,
    '天津': 117.20,
    '重庆': 106.55,
    '广州': 113.23,
    '深圳': 114.06,
    '沈阳': 123.38,
    '南京': 118.78,
    '武汉': 114.31,
    '成都': 104.06,
    '西安': 108.95,
    '杭州': 120.19,
    '青岛': 120.33,
    '大连': 121.62,
    '郑州': 113.65,
    '长沙': 113.00,
    '福州': 119.30,
    '厦门': 118.10,
    '哈尔滨': 126.63,
    '长春': 125.35,
    '石家庄': 114.48,
    '济南': 117.00,
    '太原': 112.53,
    '合肥': 117.27,
    '南昌': 115.89,
    '昆明': 102.73,
    '贵阳': 106.71,
    '兰州': 103.73,
    '乌鲁木齐': 87.68,
    '南宁': 108.33,
    '海口': 110.35,
    '银川': 106.27,
    '西宁': 101.74,
    '呼和浩特': 111.65,
    '拉萨': 91.11,
    '香港': 114.17,
    '澳门': 113.54,
    '台北': 121.50,
}

# 早晚子时流派（与 lunar_python EightChar.setSect 一致）
# 1: 23:00-23:59 日柱算明天（子时整体归次日）
# 2: 23:00-23:59 日柱算当天（区分早子时、晚子时）
SECT_MERGED_RAT = 1
SECT_SPLIT_RAT = 2
DEFAULT_SECT = SECT_SPLIT_RAT

# 反推搜索默认年份窗口
DEFAULT_SEARCH_START_YEAR = 1900
DEFAULT_SEARCH_END_YEAR = 2050
# 单次反推最多跨越的年数（含首尾）
DEFAULT_SEARCH_MAX_SPAN = 200

# 大运步数、每步流年数
DAYUN_COUNT = 8
LIUNIAN_PER_DAYUN = 10
