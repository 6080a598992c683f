from __future__ import annotations

from enum import Enum


class VoiceSpeaker(str, Enum):
    MALE_EXPERT = "Nam_ChuyenGia"
    FEMALE_WARM = "Nu_TruyenCam"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    VoiceSpeaker.MALE_EXPERT: "Nam Chuyên Gia",
    VoiceSpeaker.FEMALE_WARM: "Nữ Truyền Cảm",
}
