# -*- coding: utf-8 -*-
"""API v1"""
