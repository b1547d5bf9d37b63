# -*- coding: utf-8 -*-
"""HealthGuard 趋势分析核心：生命体征聚合与血压/心率分级。"""

__version__ = "1.0.0"
