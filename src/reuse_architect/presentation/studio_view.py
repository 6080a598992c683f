from __future__ import annotations

from typing import Any

from reuse_architect.core.domain.options import AppType, ArchitecturePattern, TechStack
from reuse_architect.core.domain.value_objects.voice_config import MAX_SPEED, MIN_SPEED
from reuse_architect.core.domain.value_objects.voice_speaker import VoiceSpeaker
from reuse_architect.presentation.playback import PlaybackController
from reuse_architect.presentation.proportion_chart import (
    conic_gradient,
    proportion_slices,
    reuse_percentage,
)
from reuse_architect.presentation.studio_state import StudioState, StudioTab
from reuse_architect.presentation.tree_view import tree_rows

TAB_TITLES = {
    StudioTab.TREE: "File Structure",
    StudioTab.DOCS: "Documentation",
    StudioTab.VIZ: "Reuse Metrics",
}
SPEED_STEP = 0.25


def build_view(state: StudioState, playback: PlaybackController, autoplay: bool = False) -> dict[str, Any]:
    """Template context for the studio page."""
    result = state.result
    slices = proportion_slices(result.diagram_data if result else None)
    session = playback.session
    return {
        "state": state,
        "app_types": list(AppType),
        "tech_stacks": list(TechStack),
        "architectures": list(ArchitecturePattern),
        "tabs": TAB_TITLES,
        "rows": tree_rows(result.file_tree if result else None, state.selected_path),
        "slices": slices,
        "pie_gradient": conic_gradient(slices),
        "reuse_percentage": reuse_percentage(result.diagram_data if result else None),
        "module_count": len(result.reused_snippets) if result else 0,
        "voices": list(VoiceSpeaker),
        "speed_range": {"min": MIN_SPEED, "max": MAX_SPEED, "step": SPEED_STEP},
        "has_audio": session is not None,
        "is_playing": playback.is_playing,
        "autoplay": autoplay,
        "playback_rate": session.playback_rate if session else state.voice.speed,
    }
