from __future__ import annotations

from fruitmatch.ui.layout import reset_button_rect


class HudRenderer:
    """Score, move counter and the reset button."""

    def render(self, arcade, window_width: int, window_height: int, score: int, moves: int) -> None:
        top = window_height - 40
        arcade.draw_text(f"Score: {score}", 20, top, arcade.color.WHITE, font_size=20, anchor_y="center")
        arcade.draw_text(f"Moves: {moves}", 20, top - 36, arcade.color.LIGHT_GRAY, font_size=16, anchor_y="center")
        left, bottom, width, height = reset_button_rect(window_width, window_height)
        arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, arcade.color.DARK_SLATE_BLUE)
        arcade.draw_lbwh_rectangle_outline(left, bottom, width, height, arcade.color.WHITE, 2)
        arcade.draw_text(
            "Reset", left + width / 2, bottom + height / 2, arcade.color.WHITE,
            font_size=16, anchor_x="center", anchor_y="center",
        )
