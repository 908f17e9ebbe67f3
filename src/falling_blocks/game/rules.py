from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    line_clear_scores: tuple[int, int, int, int] = (40, 100, 300, 1200)
    lines_per_level: int = 10
    base_fall_interval_ms: int = 1000
    fall_interval_step_ms: int = 100
    min_fall_interval_ms: int = 100

    def score_for_lines(self, lines: int, level: int) -> int:
        if lines <= 0:
            return 0
        # A single merge completes at most four rows
        lines = min(lines, len(self.line_clear_scores))
        return self.line_clear_scores[lines - 1] * level

    def level_for_lines(self, total_lines: int) -> int:
        return total_lines // self.lines_per_level + 1

    def fall_interval_for_level(self, level: int) -> int:
        interval = self.base_fall_interval_ms - (level - 1) * self.fall_interval_step_ms
        return max(self.min_fall_interval_ms, interval)
