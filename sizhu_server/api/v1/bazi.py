#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字计算API接口
"""

import logging

from fastapi import APIRouter

from sizhu_core.calculators.bazi_core_calculator import BaziCoreCalculator
from sizhu_core.calculators.bazi_to_solar import BaziToSolarConverter
from sizhu_core.data.constants import CITY_LONGITUDES
from sizhu_server.api.v1.models.bazi_base_models import (
    BaziCalculateRequest,
    BaziResponse,
    PillarsRequest,
    ReverseSearchRequest,
)
from sizhu_server.config.env_config import get_env_config
from sizhu_server.utils.async_executor import run_in_executor
from sizhu_server.utils.bazi_input_processor import BaziInputProcessor
from sizhu_server.utils.exception_handler import api_error_handler

logger = logging.getLogger(__name__)

router = APIRouter()


def _calculate(request: BaziCalculateRequest) -> dict:
    env_config = get_env_config()
    calculator = BaziCoreCalculator(reference_longitude=env_config.reference_longitude)
    moment, longitude, conversion_info = BaziInputProcessor.process_input(
        request.date,
        request.time,
        request.calendar_type,
        request.city,
        request.longitude,
        request.is_leap_month,
        oracle=calculator.oracle,
    )
    sect = request.sect if request.sect is not None else env_config.default_sect
    result = calculator.calculate_full(moment, request.gender, longitude, sect)

    data = result.model_dump(mode='json')
    if conversion_info.get('converted') or conversion_info.get('resolved_longitude') is not None:
        data['conversion_info'] = conversion_info
    return data


def _reverse_search(request: ReverseSearchRequest) -> list:
    env_config = get_env_config()
    converter = BaziToSolarConverter(
        start_year=env_config.search_start_year,
        end_year=env_config.search_end_year,
        max_span=env_config.search_max_span,
    )
    sect = request.sect if request.sect is not None else env_config.default_sect
    matches = converter.search_parallel(
        request.to_pattern(),
        request.start_year,
        request.end_year,
        sect=sect,
        max_workers=env_config.search_threads,
    )
    return [match.model_dump() for match in matches]


@router.post("/bazi/calculate", response_model=BaziResponse, summary="四柱排盘（含大运流年）")
@api_error_handler
async def calculate_bazi(request: BaziCalculateRequest):
    """
    根据出生日期时间排四柱，并计算大运、流年

    - 支持农历输入（calendar_type=lunar，可指定闰月）
    - 支持按城市或经度做真太阳时校正
    """
    data = await run_in_executor(_calculate, request)
    return BaziResponse(success=True, data=data)


@router.post("/bazi/manual", response_model=BaziResponse, summary="手工四柱排盘")
@api_error_handler
async def manual_bazi(request: PillarsRequest):
    """由四柱干支直接排盘（不含日期、人元司令、大运）"""
    chart = BaziCoreCalculator().assemble_manual(request.to_pattern())
    return BaziResponse(success=True, data=chart.model_dump(mode='json'))


@router.post("/bazi/reverse-search", response_model=BaziResponse, summary="八字反推公历")
@api_error_handler
async def reverse_search(request: ReverseSearchRequest):
    """
    根据四柱反推所有对应的公历时刻

    没有结果时返回空列表。
    """
    matches = await run_in_executor(_reverse_search, request)
    message = None if matches else "所给年份范围内没有对应的日期"
    return BaziResponse(success=True, data=matches, message=message)


@router.get("/bazi/cities", response_model=BaziResponse, summary="城市经度表")
async def list_cities():
    return BaziResponse(success=True, data=CITY_LONGITUDES)
