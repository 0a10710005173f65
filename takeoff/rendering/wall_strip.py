"""Wall strip SVG rendering.

Draws each wall as an independent horizontal elevation strip, with stud
centerlines, opening cut-outs and dimension labels, followed by a summary
and an assumptions panel. The renderer does no geometry of its own: it
scales precomputed feet values to pixels and emits markup.
"""

from __future__ import annotations
from pydantic import BaseModel

from takeoff.models import InvalidArgumentError, StudRole, StudType, TakeoffProject, TakeoffReport

BACKGROUND = "#f8fafc"
WALL_FILL = "#c7d9eb"

WIDTH = 1200
LEFT_MARGIN = 60
RIGHT_MARGIN = 60
TOP_START = 120
MAX_ELEVATION_HEIGHT = 180
MIN_PIXELS_PER_FOOT = 2.0
ROW_GAP = 48
RIGHT_DIM_RESERVE = 95
DRAWABLE_WIDTH = WIDTH - LEFT_MARGIN - RIGHT_MARGIN
LINE_HEIGHT = 20


class PenetrationDto(BaseModel):
    """Opening rectangle in wall-local feet."""
    id: str
    type: str
    x_feet: float
    y_feet: float
    width_feet: float
    height_feet: float


class StudLayoutDto(BaseModel):
    stud_type: StudType
    spacing_inches: float
    stud_center_x_feet: list[float]
    king_center_x_feet: list[float] = []


class WallSegmentDto(BaseModel):
    name: str
    length_feet: float
    penetrations: list[PenetrationDto] = []
    stud_layout: StudLayoutDto | None = None


class SummaryDto(BaseModel):
    total_length_feet: float
    net_area_sq_ft: float
    drywall_sheets: int
    stud_count: int
    insulation_units: int


class WallStripDto(BaseModel):
    project_name: str
    height_feet: float
    walls: list[WallSegmentDto]
    summary: SummaryDto
    assumptions: list[str] = []


def escape_xml(text: str | None) -> str:
    if not text:
        return ""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


class WallStripSvgRenderer:
    """Renders a `WallStripDto` as a standalone SVG document."""

    def render(self, dto: WallStripDto) -> str:
        if not dto.walls:
            raise InvalidArgumentError("walls", "Walls collection is empty.")

        height_feet = max(0.0, dto.height_feet)
        max_length = max(1.0, max(w.length_feet for w in dto.walls))
        width_ppf = (DRAWABLE_WIDTH - RIGHT_DIM_RESERVE) / max_length
        height_ppf = MAX_ELEVATION_HEIGHT / height_feet if height_feet > 0 else width_ppf
        # One scale for both axes keeps wall proportions realistic.
        ppf = max(MIN_PIXELS_PER_FOOT, min(width_ppf, height_ppf))

        strip_height = max(1, round(height_feet * ppf))
        block_height = strip_height + 62
        n = len(dto.walls)
        wall_bottom = TOP_START + n * block_height + max(0, n - 1) * ROW_GAP

        summary_y = wall_bottom + 50
        summary_body_y = summary_y + 25
        summary_bottom = summary_body_y + 5 * LINE_HEIGHT
        assumptions_title_y = summary_bottom + 36
        assumptions_body_y = assumptions_title_y + 25
        assumptions_bottom = assumptions_body_y + (max(1, len(dto.assumptions)) - 1) * LINE_HEIGHT
        page_height = max(700, assumptions_bottom + 80)

        out = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{WIDTH}" height="{page_height}" '
            f'viewBox="0 0 {WIDTH} {page_height}">',
            f'  <rect x="0" y="0" width="{WIDTH}" height="{page_height}" fill="{BACKGROUND}" />',
            '  <text x="50" y="40" font-family="Arial" font-size="24">RapidTakeoff - Elevations</text>',
            f'  <text x="50" y="70" font-family="Arial" font-size="14">'
            f'Project: {escape_xml(dto.project_name)}</text>',
        ]

        y = TOP_START
        for wall in dto.walls:
            out.extend(self._render_wall(wall, y, strip_height, ppf, dto.height_feet))
            y += block_height + ROW_GAP

        s = dto.summary
        out.append(f'  <text x="50" y="{summary_y}" font-family="Arial" font-size="16">Summary</text>')
        lines = [
            f"Total Length: {s.total_length_feet:.2f} ft",
            f"Height: {dto.height_feet:.2f} ft",
            f"Net Area: {s.net_area_sq_ft:.2f} sq ft",
            f"Drywall Sheets: {s.drywall_sheets}",
            f"Stud Count: {s.stud_count}",
            f"Insulation Units: {s.insulation_units}",
        ]
        for i, line in enumerate(lines):
            out.append(f'  <text x="50" y="{summary_body_y + i * LINE_HEIGHT}" font-size="12">{line}</text>')

        out.append(
            f'  <text x="50" y="{assumptions_title_y}" font-family="Arial" font-size="16">Assumptions</text>'
        )
        if not dto.assumptions:
            out.append(f'  <text x="50" y="{assumptions_body_y}" font-size="12">No assumptions provided.</text>')
        for i, assumption in enumerate(dto.assumptions):
            out.append(
                f'  <text x="50" y="{assumptions_body_y + i * LINE_HEIGHT}" font-size="12">'
                f'{escape_xml(assumption)}</text>'
            )

        out.append("</svg>")
        return "\n".join(out) + "\n"

    def _render_wall(
        self, wall: WallSegmentDto, top: int, strip_height: int, ppf: float, height_feet: float,
    ) -> list[str]:
        out: list[str] = []
        left = LEFT_MARGIN
        rect_width = wall.length_feet * ppf
        right = left + rect_width
        bottom = top + strip_height

        out.append(
            f'  <rect x="{left}" y="{top}" width="{rect_width:.2f}" height="{strip_height}" '
            f'fill="{WALL_FILL}" stroke="#1f2937" stroke-width="1" />'
        )

        layout = wall.stud_layout
        if layout is not None:
            stroke = min(1.4, max(0.8, layout.stud_type.width.feet * ppf * 0.35))
            kings = set(layout.king_center_x_feet)
            for cx in layout.stud_center_x_feet:
                if cx < 0 or cx > wall.length_feet:
                    continue
                role = StudRole.KING if cx in kings else StudRole.COMMON
                sx = left + cx * ppf
                out.append(
                    f'  <line class="stud {role.value}" x1="{sx:.2f}" y1="{top}" x2="{sx:.2f}" '
                    f'y2="{bottom}" stroke="#334155" stroke-width="{stroke:.2f}" '
                    'stroke-dasharray="1.5 5.5" stroke-linecap="round" opacity="0.65" />'
                )

        for p in wall.penetrations:
            if p.width_feet <= 0 or p.height_feet <= 0:
                continue
            px = left + p.x_feet * ppf
            pw = p.width_feet * ppf
            py = top + strip_height - (p.y_feet + p.height_feet) * ppf
            ph = p.height_feet * ppf

            clip_left = max(left, px)
            clip_right = min(right, px + pw)
            clip_top = max(top, py)
            clip_bottom = min(bottom, py + ph)
            if clip_right <= clip_left or clip_bottom <= clip_top:
                continue

            cw = clip_right - clip_left
            ch = clip_bottom - clip_top
            out.append(
                f'  <rect class="penetration" x="{clip_left:.2f}" y="{clip_top:.2f}" '
                f'width="{cw:.2f}" height="{ch:.2f}" fill="{BACKGROUND}" '
                'stroke="#0f172a" stroke-width="1" />'
            )
            if cw >= 38 and ch >= 16:
                out.append(
                    f'  <text x="{clip_left + cw / 2:.2f}" y="{clip_top + ch / 2 + 4:.2f}" '
                    f'font-family="Arial" font-size="10" text-anchor="middle">{escape_xml(p.id)}</text>'
                )

        # Height dimension
        dim_x = right + 22
        out.extend([
            f'  <line x1="{dim_x:.2f}" y1="{top}" x2="{dim_x:.2f}" y2="{bottom}" stroke="#374151" stroke-width="1" />',
            f'  <line x1="{dim_x - 5:.2f}" y1="{top}" x2="{dim_x + 5:.2f}" y2="{top}" stroke="#374151" stroke-width="1" />',
            f'  <line x1="{dim_x - 5:.2f}" y1="{bottom}" x2="{dim_x + 5:.2f}" y2="{bottom}" stroke="#374151" stroke-width="1" />',
            f'  <text x="{dim_x + 10:.2f}" y="{top + strip_height // 2 + 4}" font-family="Arial" '
            f'font-size="11" text-anchor="start">{height_feet:.2f} ft H</text>',
        ])

        # Length dimension
        dim_y = bottom + 18
        out.extend([
            f'  <line x1="{left}" y1="{dim_y}" x2="{right:.2f}" y2="{dim_y}" stroke="#374151" stroke-width="1" />',
            f'  <line x1="{left}" y1="{dim_y - 5}" x2="{left}" y2="{dim_y + 5}" stroke="#374151" stroke-width="1" />',
            f'  <line x1="{right:.2f}" y1="{dim_y - 5}" x2="{right:.2f}" y2="{dim_y + 5}" stroke="#374151" stroke-width="1" />',
            f'  <text x="{left + rect_width / 2:.2f}" y="{dim_y + 16}" font-family="Arial" '
            f'font-size="12" text-anchor="middle">{wall.length_feet:.2f} ft L</text>',
            f'  <text x="{left + rect_width / 2:.2f}" y="{dim_y + 38}" font-family="Arial" '
            f'font-size="14" text-anchor="middle">{escape_xml(wall.name)}</text>',
        ])
        return out


def build_wall_strip(project: TakeoffProject, report: TakeoffReport) -> WallStripDto:
    """Map a project and its computed report onto the render contract."""
    settings = project.settings
    walls: list[WallSegmentDto] = []

    for wall in project.walls:
        layout = None
        if wall.index < len(report.wall_plans):
            plan = report.wall_plans[wall.index]
            centers = plan.final_centers if settings.studs_subtract_penetrations else plan.nominal_centers
            kings = plan.king_centers if settings.studs_subtract_penetrations else ()
            layout = StudLayoutDto(
                stud_type=settings.stud,
                spacing_inches=settings.studs_spacing_inches,
                stud_center_x_feet=list(centers),
                king_center_x_feet=list(kings),
            )
        walls.append(WallSegmentDto(
            name=f"Wall {wall.number}",
            length_feet=wall.length.feet,
            penetrations=[
                PenetrationDto(
                    id=o.label(i), type=o.type,
                    x_feet=o.x.feet, y_feet=o.y.feet,
                    width_feet=o.width.feet, height_feet=o.height.feet,
                )
                for i, o in enumerate(project.openings) if o.wall_index == wall.index
            ],
            stud_layout=layout,
        ))

    summary = SummaryDto(
        total_length_feet=project.total_wall_length().feet,
        net_area_sq_ft=report.net_area.square_feet,
        drywall_sheets=report.drywall.sheet_count if report.drywall else 0,
        stud_count=report.studs.total_studs if report.studs else 0,
        insulation_units=report.insulation.quantity if report.insulation else 0,
    )
    assumptions = [
        f"Studs {settings.stud_type} @ {settings.studs_spacing_inches:g} in OC",
        f"Drywall {settings.drywall_sheet}, waste {settings.drywall_waste:g}",
        "Openings framed with kings, trimmers and cripples"
        if settings.studs_subtract_penetrations
        else "Studs counted on-center, openings ignored",
    ]
    return WallStripDto(
        project_name=project.name,
        height_feet=project.wall_height.feet,
        walls=walls,
        summary=summary,
        assumptions=assumptions + report.warnings,
    )
