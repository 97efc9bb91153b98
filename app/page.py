"""HTML pages served by the web front end."""
from __future__ import annotations

from html import escape
from typing import List, Sequence

from models import BoardState, GameState, PathState
from logic.render import format_point, render_board

PAGE_TITLE = "Pirots2ASCII - Game Board Visualization"

BADGE_COLORS = {
    "window": "#dc3545",
    "path": "#ff6b35",
}

STYLE = """
body { font-family: 'Courier New', monospace; margin: 20px; background-color: #f5f5f5; }
.container { max-width: 1200px; margin: 0 auto; background: white; padding: 20px;
             border-radius: 8px; box-shadow: 0 2px 10px rgba(0,0,0,0.1); }
h1 { color: #333; text-align: center; margin-bottom: 30px; }
.upload-area { border: 2px dashed #ccc; border-radius: 8px; padding: 40px;
               text-align: center; margin-bottom: 30px; background-color: #fafafa; }
.btn { background-color: #007bff; color: white; padding: 10px 20px; border: none;
       border-radius: 4px; cursor: pointer; font-size: 16px; }
.back-btn { background-color: #6c757d; color: white; padding: 8px 16px; border-radius: 4px;
            text-decoration: none; display: inline-block; margin-bottom: 20px; }
.summary { background-color: #e9ecef; padding: 15px; border-radius: 5px; margin-bottom: 20px; }
.board-container { margin: 20px 0; padding: 15px; background-color: #f8f9fa;
                   border: 1px solid #dee2e6; border-radius: 5px; }
.board-title { font-weight: bold; color: #495057; margin-bottom: 10px; font-size: 16px; }
.badge { color: white; padding: 2px 6px; border-radius: 3px; font-size: 11px; margin-left: 10px; }
.board { background-color: #000; color: #00ff00; padding: 15px; border-radius: 4px;
         white-space: pre; overflow-x: auto; font-size: 14px; line-height: 1.2; }
.raw-data { font-size: 12px; color: #666; background-color: #f1f1f1; padding: 10px;
            border-radius: 4px; margin-top: 10px; word-break: break-all; display: none; }
.toggle-raw { font-size: 12px; color: #007bff; cursor: pointer; text-decoration: underline;
              margin-top: 5px; }
"""

SCRIPT = """
function toggleRaw(id) {
    const element = document.getElementById('raw-' + id);
    element.style.display = element.style.display === 'block' ? 'none' : 'block';
}
"""


def _page(title: str, body: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n<head>\n<meta charset="UTF-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"<title>{escape(title)}</title>\n<style>{STYLE}</style>\n</head>\n"
        f'<body>\n<div class="container">\n{body}\n</div>\n'
        f"<script>{SCRIPT}</script>\n</body>\n</html>\n"
    )


def render_index_page() -> str:
    body = (
        "<h1>Pirots2ASCII - Game Board Visualization Tool</h1>\n"
        '<div class="upload-area">\n'
        "<h3>Upload XML File</h3>\n"
        "<p>Please select an XML file containing game data</p>\n"
        '<form action="/upload" method="post" enctype="multipart/form-data">\n'
        '<input type="file" name="xmlfile" accept=".xml" required style="margin: 10px;">\n'
        '<br>\n<button type="submit" class="btn">Parse and Display Game Board</button>\n'
        "</form>\n</div>"
    )
    return _page(PAGE_TITLE, body)


def _details(state: GameState) -> List[str]:
    lines = [f"<strong>Data Type:</strong> {state.kind.upper()}<br>"]
    if isinstance(state, BoardState):
        if state.mask:
            lines.append(f"<strong>Bit Mask:</strong> {escape(state.mask)}<br>")
        if state.highlights:
            positions = ", ".join(f"({r},{c})" for r, c in sorted(state.highlights))
            lines.append(f"<strong>Highlight Positions:</strong> {positions}<br>")
    elif isinstance(state, PathState):
        coords = " → ".join(format_point(p) for p in state.points)
        lines.append(f"<strong>Path Coordinates:</strong> {coords}<br>")
        step = state.step
        lines.append("<strong>Step Information:</strong><br>")
        lines.append(f"• Symbol: {escape(step.symbol or 'N/A')}<br>")
        lines.append(f"• Current Position: {escape(step.position or 'N/A')}<br>")
        lines.append(f"• Previous Position: {escape(step.previous_position or 'N/A')}<br>")
        lines.append(f"• Win Amount: {escape(step.win_amount or '0')}<br>")
        if step.is_first_step:
            lines.append("• First Step<br>")
        if step.is_last_step:
            lines.append("• Last Step<br>")
        if step.special_marker:
            lines.append(f"• Angry Birds: {escape(step.special_marker)}<br>")
    lines.append(f"<strong>Raw Data:</strong><br>{escape(state.raw)}")
    return lines


def _content(state: GameState) -> str:
    if isinstance(state, BoardState):
        return render_board(state.board, state.title, state.highlights, markup=True)
    if isinstance(state, PathState):
        return escape(state.rendering)
    raise TypeError(f"Unsupported game state {type(state).__name__}")


def render_state(state: GameState, index: int) -> str:
    color = BADGE_COLORS.get(state.kind, BADGE_COLORS["window"])
    badge = (
        f'<span class="badge" style="background-color: {color};">'
        f"{state.kind.upper()}</span>"
    )
    details = "\n".join(_details(state))
    return (
        '<div class="board-container">\n'
        f'<div class="board-title">{escape(state.title)} {badge}</div>\n'
        f'<div class="board">{_content(state)}</div>\n'
        f'<div class="toggle-raw" onclick="toggleRaw({index})">Show/Hide Details</div>\n'
        f'<div class="raw-data" id="raw-{index}">\n{details}\n</div>\n'
        "</div>"
    )


def render_results_page(states: Sequence[GameState], filename: str) -> str:
    parts = [
        '<a href="/" class="back-btn">← Back to Upload</a>',
        "<h1>Game Board Visualization Results</h1>",
        '<div class="summary">\n<h3>Parse Summary</h3>\n'
        f"<p>Total <strong>{len(states)}</strong> game states found</p>\n"
        f"<p>File name: <strong>{escape(filename)}</strong></p>\n</div>",
    ]
    parts.extend(render_state(state, index) for index, state in enumerate(states))
    return _page("Game Board Visualization Results", "\n".join(parts))


def render_error_page(message: str) -> str:
    body = (
        "<h1>Parse Error</h1>\n"
        f"<p>Unable to parse the uploaded XML file: {escape(message)}</p>\n"
        '<a href="/">Back</a>'
    )
    return _page("Parse Error", body)


__all__ = [
    "render_index_page",
    "render_results_page",
    "render_error_page",
    "render_state",
]
