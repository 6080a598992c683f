from __future__ import annotations

from enum import Enum


class AppType(str, Enum):
    SAAS_PLATFORM = "Nền Tảng SaaS Enterprise"
    ECOMMERCE = "Hệ Thống E-commerce Đa Kênh"
    INTERNAL_TOOL = "Công Cụ Quản Trị Nội Bộ (Internal Tool)"
    API_GATEWAY = "Hệ Thống API Gateway & Microservices"
    AI_WRAPPER = "Ứng Dụng Tích Hợp AI/LLM"
    LANDING_PAGE = "Landing Page Chuyển Đổi Cao"
