from __future__ import annotations

from enum import Enum


class ArchitecturePattern(str, Enum):
    CLEAN_ARCH = "Clean Architecture"
    MVC = "MVC (Model-View-Controller)"
    ATOMIC = "Atomic Design (Frontend Focus)"
    EVENT_DRIVEN = "Event-Driven Architecture"
    SERVERLESS = "Serverless Function"
