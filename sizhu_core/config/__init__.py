# -*- coding: utf-8 -*-
"""排盘规则表：十二长生、神煞、人元司令"""
