# -*- coding: utf-8 -*-
"""API 请求/响应模型"""

from .bazi_base_models import BaziResponse, BaziCalculateRequest, PillarsRequest, ReverseSearchRequest

__all__ = ['BaziResponse', 'BaziCalculateRequest', 'PillarsRequest', 'ReverseSearchRequest']
