"""Diet plan PDF layout built on ReportLab Platypus.

Pages are A4 and measured in millimetres. Every page is decorated before its
flowables are drawn: black fill, faded background image, header bar and the
footer. Page 1 additionally carries the logo and subtitle in the header bar.
"""

import html
import io
import logging
from dataclasses import dataclass, field

from reportlab.graphics import renderPDF
from reportlab.graphics.shapes import Drawing
from reportlab.lib import colors
from reportlab.lib.enums import TA_LEFT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import mm
from reportlab.pdfgen.canvas import Canvas
from reportlab.platypus import (
    BaseDocTemplate,
    CondPageBreak,
    Flowable,
    Frame,
    NextPageTemplate,
    PageTemplate,
    Paragraph,
    Spacer,
    Table,
    TableStyle,
)

from diet_planner.domain.assets import BrandAssets, LogoAsset
from diet_planner.domain.plans import (
    DEFAULT_TRAINER_NAME,
    ClientProfile,
    DietPlan,
    MealSchedule,
    NutritionTargets,
)
from diet_planner.services.sanitize import format_cell_text, sanitize_text

logger = logging.getLogger(__name__)

LIME_GREEN = colors.Color(164 / 255, 255 / 255, 46 / 255)
BLACK = colors.black
WHITE = colors.white

PAGE_WIDTH, PAGE_HEIGHT = A4
SIDE_MARGIN = 15 * mm
RULE_INSET = 10 * mm
CONTENT_WIDTH = PAGE_WIDTH - 2 * SIDE_MARGIN
LABEL_COLUMN_WIDTH = 50 * mm

HEADER_HEIGHT = 45 * mm
FIRST_PAGE_TOP = 55 * mm
LATER_PAGE_TOP = 20 * mm
BOTTOM_MARGIN = 30 * mm
# Sections start on a fresh page once the cursor passes 240 mm from the top.
SECTION_MIN_SPACE = PAGE_HEIGHT - 240 * mm - BOTTOM_MARGIN

LOGO_HEIGHT = 16 * mm
LOGO_TOP = 14 * mm
SUBTITLE_BASELINE = 36 * mm
FOOTER_RULE_Y = 20 * mm
FOOTER_TEXT_Y = 12 * mm

NOT_AVAILABLE = "N/A"
NOT_SPECIFIED = "Not specified"

_SECTION_TITLE = ParagraphStyle(
    "SectionTitle",
    fontName="Helvetica-Bold",
    fontSize=12,
    leading=14,
    textColor=LIME_GREEN,
    spaceAfter=3 * mm,
    keepWithNext=1,
)
_BODY = ParagraphStyle(
    "Body",
    fontName="Helvetica",
    fontSize=10,
    leading=5 * mm,
    textColor=WHITE,
    alignment=TA_LEFT,
)


def _cell_styles(font_size: int) -> tuple[ParagraphStyle, ParagraphStyle]:
    label = ParagraphStyle(
        f"CellLabel{font_size}",
        fontName="Helvetica-Bold",
        fontSize=font_size,
        leading=font_size * 1.15,
        textColor=LIME_GREEN,
    )
    value = ParagraphStyle(
        f"CellValue{font_size}",
        parent=label,
        fontName="Helvetica",
        textColor=WHITE,
    )
    return label, value


def cover_fit(
    image_width: float, image_height: float, page_width: float, page_height: float
) -> tuple[float, float, float, float]:
    """Scale an image to cover the page, centred. Returns x, y, width, height."""
    image_aspect = image_width / image_height
    page_aspect = page_width / page_height
    if image_aspect >= page_aspect:
        height = page_height
        width = page_height * image_aspect
    else:
        width = page_width
        height = page_width / image_aspect
    return (page_width - width) / 2, (page_height - height) / 2, width, height


def client_info_rows(profile: ClientProfile) -> list[tuple[str, str]]:
    """Key/value rows for the client information table."""
    return [
        ("Name", sanitize_text(profile.name)),
        ("Gender", sanitize_text(profile.gender or NOT_AVAILABLE)),
        ("Age", sanitize_text(profile.age)),
        ("Weight", sanitize_text(_with_unit(profile.weight, " kg"))),
        ("Height", sanitize_text(_with_unit(profile.height, " cm"))),
        ("Goal", sanitize_text(profile.goal or NOT_AVAILABLE)),
        ("Diet Type", sanitize_text(profile.diet_type or NOT_AVAILABLE)),
        ("Start Date", sanitize_text(profile.start_date or NOT_AVAILABLE)),
    ]


def macro_rows(targets: NutritionTargets) -> list[tuple[str, str]]:
    """Key/value rows for the daily macros table."""
    return [
        ("Calories", sanitize_text(_with_unit(targets.calories, " kcal"))),
        ("Protein", sanitize_text(_with_unit(targets.protein, "g"))),
        ("Carbs", sanitize_text(_with_unit(targets.carbs, "g"))),
        ("Fat", sanitize_text(_with_unit(targets.fat, "g"))),
        ("Water Intake", sanitize_text(_with_unit(targets.water_intake, "L/day"))),
    ]


def meal_rows(meals: MealSchedule) -> list[tuple[str, str]]:
    """Rows for the meal schedule; blank slots read "Not specified"."""
    return [
        (label, format_cell_text(description or NOT_SPECIFIED))
        for label, description in meals.entries()
    ]


def _with_unit(value: str, unit: str) -> str:
    return f"{value}{unit}" if value else NOT_AVAILABLE


def _markup(text: str) -> str:
    """Escape text for Paragraph markup, keeping line breaks."""
    return html.escape(text, quote=False).replace("\n", "<br/>")


@dataclass
class PageDecorator:
    """Paints the per-page chrome exactly once per physical page.

    Platypus calls the page template hook at the start of every page; the
    recorded page numbers make any repeated call for the same page a no-op.
    """

    assets: BrandAssets
    subtitle: str
    footer_text: str
    background_pages: list[int] = field(default_factory=list)
    header_pages: list[int] = field(default_factory=list)
    footer_pages: list[int] = field(default_factory=list)

    def __call__(self, canvas: Canvas, doc: BaseDocTemplate) -> None:
        canvas.saveState()
        self.paint_background(canvas)
        self.paint_header(canvas)
        self.paint_footer(canvas)
        canvas.restoreState()

    def paint_background(self, canvas: Canvas) -> None:
        page = canvas.getPageNumber()
        if page in self.background_pages:
            return
        canvas.setFillColor(BLACK)
        canvas.rect(0, 0, PAGE_WIDTH, PAGE_HEIGHT, stroke=0, fill=1)
        background = self.assets.background
        x, y, width, height = cover_fit(
            background.width, background.height, PAGE_WIDTH, PAGE_HEIGHT
        )
        try:
            canvas.drawImage(
                background.image, x, y, width=width, height=height, mask="auto"
            )
        except Exception:
            logger.warning(
                "Background image could not be drawn",
                exc_info=True,
                extra={"page": page},
            )
        self.background_pages.append(page)

    def paint_header(self, canvas: Canvas) -> None:
        page = canvas.getPageNumber()
        if page in self.header_pages:
            return
        canvas.setFillColor(BLACK)
        canvas.rect(
            0, PAGE_HEIGHT - HEADER_HEIGHT, PAGE_WIDTH, HEADER_HEIGHT, stroke=0, fill=1
        )
        if page == 1:
            logo = self.assets.logo
            logo_width = LOGO_HEIGHT * logo.aspect
            _draw_logo(
                canvas,
                logo,
                (PAGE_WIDTH - logo_width) / 2,
                PAGE_HEIGHT - LOGO_TOP - LOGO_HEIGHT,
                logo_width,
                LOGO_HEIGHT,
            )
            canvas.setFont("Helvetica-Bold", 12)
            canvas.setFillColor(LIME_GREEN)
            canvas.drawCentredString(
                PAGE_WIDTH / 2, PAGE_HEIGHT - SUBTITLE_BASELINE, self.subtitle
            )
        self.header_pages.append(page)

    def paint_footer(self, canvas: Canvas) -> None:
        page = canvas.getPageNumber()
        if page in self.footer_pages:
            return
        canvas.setStrokeColor(LIME_GREEN)
        canvas.setLineWidth(0.5 * mm)
        canvas.line(RULE_INSET, FOOTER_RULE_Y, PAGE_WIDTH - RULE_INSET, FOOTER_RULE_Y)
        canvas.setFont("Helvetica-Bold", 9)
        canvas.setFillColor(LIME_GREEN)
        canvas.drawCentredString(PAGE_WIDTH / 2, FOOTER_TEXT_Y, self.footer_text)
        self.footer_pages.append(page)


def _draw_logo(  # noqa: PLR0913
    canvas: Canvas,
    logo: LogoAsset,
    x: float,
    y: float,
    width: float,
    height: float,
) -> None:
    if isinstance(logo.image, Drawing):
        canvas.saveState()
        canvas.translate(x, y)
        canvas.scale(width / logo.width, height / logo.height)
        renderPDF.draw(logo.image, canvas, 0, 0)
        canvas.restoreState()
        return
    canvas.drawImage(logo.image, x, y, width=width, height=height, mask="auto")


class SectionRule(Flowable):
    """Lime rule above a section title, reaching past the frame edges."""

    def __init__(self, overhang: float, thickness: float) -> None:
        super().__init__()
        self.overhang = overhang
        self.thickness = thickness
        self.spaceAfter = 2 * mm
        self.keepWithNext = 1

    def wrap(self, avail_width: float, avail_height: float) -> tuple[float, float]:
        self.width = avail_width
        return avail_width, self.thickness

    def draw(self) -> None:
        self.canv.setStrokeColor(LIME_GREEN)
        self.canv.setLineWidth(self.thickness)
        y = self.thickness / 2
        self.canv.line(-self.overhang, y, self.width + self.overhang, y)


@dataclass(frozen=True)
class RenderedPlan:
    """PDF bytes plus the pages each decoration landed on."""

    content: bytes
    page_count: int
    background_pages: tuple[int, ...]
    header_pages: tuple[int, ...]


@dataclass
class DietPlanRenderer:
    """Lays out a diet plan snapshot as a branded, paginated PDF."""

    brand_name: str = "G-FORCE"
    footer_tagline: str = "Fuel Your Power"
    default_trainer_name: str = DEFAULT_TRAINER_NAME

    def trainer_name(self, profile: ClientProfile) -> str:
        """Name credited in the footer, falling back to the default trainer."""
        return sanitize_text(profile.trainer_name).strip() or self.default_trainer_name

    def render(self, plan: DietPlan, assets: BrandAssets) -> RenderedPlan:
        """Render the plan and return the finished document."""
        buffer = io.BytesIO()
        trainer = self.trainer_name(plan.profile)
        decorator = PageDecorator(
            assets=assets,
            subtitle=f"Your Personalized {self.brand_name} Diet Plan.",
            footer_text=f"Prepared by {trainer} | {self.footer_tagline}",
        )
        doc = BaseDocTemplate(
            buffer,
            pagesize=A4,
            leftMargin=SIDE_MARGIN,
            rightMargin=SIDE_MARGIN,
            topMargin=LATER_PAGE_TOP,
            bottomMargin=BOTTOM_MARGIN,
            title=f"{sanitize_text(plan.profile.name)} Diet Plan",
            author=trainer,
        )
        doc.addPageTemplates(
            [
                PageTemplate(
                    id="first", frames=[_content_frame(FIRST_PAGE_TOP)], onPage=decorator
                ),
                PageTemplate(
                    id="later", frames=[_content_frame(LATER_PAGE_TOP)], onPage=decorator
                ),
            ]
        )
        doc.build(self._story(plan))
        return RenderedPlan(
            content=buffer.getvalue(),
            page_count=doc.page,
            background_pages=tuple(decorator.background_pages),
            header_pages=tuple(decorator.header_pages),
        )

    def _story(self, plan: DietPlan) -> list[Flowable]:
        story: list[Flowable] = [NextPageTemplate("later")]
        story += _section("CLIENT INFORMATION")
        story.append(_key_value_table(client_info_rows(plan.profile), 10, 4 * mm))
        story.append(Spacer(1, 10 * mm))
        story += _section("DAILY MACROS TARGET")
        story.append(_key_value_table(macro_rows(plan.targets), 10, 4 * mm))
        story.append(Spacer(1, 10 * mm))
        story.append(CondPageBreak(SECTION_MIN_SPACE))
        story += _section("DAILY MEAL SCHEDULE")
        story.append(_key_value_table(meal_rows(plan.meals), 9, 5 * mm))
        story.append(Spacer(1, 10 * mm))
        if plan.targets.supplements.strip():
            story.append(CondPageBreak(SECTION_MIN_SPACE))
            story += _section("SUPPLEMENTS")
            story += _paragraphs(plan.targets.supplements)
            story.append(Spacer(1, 10 * mm))
        if plan.notes.strip():
            story.append(CondPageBreak(SECTION_MIN_SPACE))
            story += _section("TIPS & GUIDELINES")
            story += _paragraphs(plan.notes)
        return story


def _content_frame(top: float) -> Frame:
    return Frame(
        SIDE_MARGIN,
        BOTTOM_MARGIN,
        CONTENT_WIDTH,
        PAGE_HEIGHT - top - BOTTOM_MARGIN,
        leftPadding=0,
        rightPadding=0,
        topPadding=0,
        bottomPadding=0,
    )


def _section(title: str) -> list[Flowable]:
    return [
        SectionRule(overhang=SIDE_MARGIN - RULE_INSET, thickness=0.5 * mm),
        Paragraph(_markup(title), _SECTION_TITLE),
    ]


def _key_value_table(
    rows: list[tuple[str, str]], font_size: int, padding: float
) -> Table:
    label_style, value_style = _cell_styles(font_size)
    data = [
        [Paragraph(_markup(label), label_style), Paragraph(_markup(value), value_style)]
        for label, value in rows
    ]
    table = Table(
        data,
        colWidths=[LABEL_COLUMN_WIDTH, CONTENT_WIDTH - LABEL_COLUMN_WIDTH],
        hAlign="LEFT",
        splitInRow=1,
    )
    table.setStyle(
        TableStyle(
            [
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ("GRID", (0, 0), (-1, -1), 0.1 * mm, LIME_GREEN),
                ("LEFTPADDING", (0, 0), (-1, -1), padding),
                ("RIGHTPADDING", (0, 0), (-1, -1), padding),
                ("TOPPADDING", (0, 0), (-1, -1), padding),
                ("BOTTOMPADDING", (0, 0), (-1, -1), padding),
            ]
        )
    )
    return table


def _paragraphs(text: str) -> list[Flowable]:
    """Wrap free text to the content width, one flowable per input line."""
    lines = sanitize_text(text).splitlines() or [""]
    return [
        Paragraph(_markup(line), _BODY) if line.strip() else Spacer(1, 5 * mm)
        for line in lines
    ]
