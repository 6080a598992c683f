from __future__ import annotations

from enum import Enum


class TechStack(str, Enum):
    REACT_NODE = "React + Node.js (MERN)"
    NEXT_SUPABASE = "Next.js + Supabase"
    VUE_PYTHON = "Vue.js + Python (FastAPI)"
    ANGULAR_JAVA = "Angular + Java Spring Boot"
    FLUTTER_FIREBASE = "Flutter + Firebase"
