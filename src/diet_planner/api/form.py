"""Diet plan form page."""

from html import escape

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from pydantic.alias_generators import to_camel

from diet_planner.domain.plans import (
    DIET_TYPE_CHOICES,
    GENDER_CHOICES,
    GOAL_CHOICES,
    MEAL_SLOTS,
)
from diet_planner.services.plans import GENERATED_MESSAGE

router = APIRouter(tags=["form"])


@router.get("/", response_class=HTMLResponse)
async def form_page(request: Request) -> HTMLResponse:
    """Serve the generator form."""
    settings = request.app.state.container.settings
    return HTMLResponse(
        render_form_page(settings.brand_name, settings.default_trainer_name)
    )


def render_form_page(brand_name: str, default_trainer_name: str) -> str:
    """Build the form document with the current choices and meal slots."""
    client_fields = "".join(
        [
            _input("clientName", "Client Name *"),
            _select("gender", "Gender", [(c, c) for c in GENDER_CHOICES]),
            _input("age", "Age *", input_type="number"),
            _input("weight", "Weight (kg) *", input_type="number"),
            _input("height", "Height (cm)", input_type="number"),
            _select("goal", "Goal", [(c, c) for c in GOAL_CHOICES]),
            _select("dietType", "Diet Type", list(DIET_TYPE_CHOICES)),
            _input("startDate", "Plan Start Date", input_type="date"),
            _input("trainerName", "Trainer Name", value=default_trainer_name),
        ]
    )
    macro_fields = "".join(
        [
            _input("calories", "Calories (kcal/day)", input_type="number"),
            _input("protein", "Protein (g)", input_type="number"),
            _input("carbs", "Carbs (g)", input_type="number"),
            _input("fat", "Fat (g)", input_type="number"),
            _input("waterIntake", "Water Intake (L/day)", input_type="number"),
            _textarea(
                "supplements",
                "Supplements",
                "e.g., Multivitamin, Whey, Omega-3",
            ),
        ]
    )
    meal_fields = "".join(
        _textarea(
            to_camel(slot.field), slot.form_label, slot.placeholder, group="meals"
        )
        for slot in MEAL_SLOTS
    )
    notes_field = _textarea(
        "notes",
        "Notes for Client",
        "Add any special instructions, tips, or guidelines...",
    )
    brand = escape(brand_name)
    return (
        _PAGE_HEAD.replace("{brand}", brand)
        + _card("Client Information", client_fields)
        + _card("Daily Macros Target", macro_fields)
        + _card("Daily Meal Schedule", meal_fields)
        + _card("Additional Notes", notes_field)
        + _PAGE_TAIL.replace("{brand}", brand).replace(
            "{generated}", escape(GENERATED_MESSAGE)
        )
    )


def _input(
    name: str, label: str, input_type: str = "text", value: str = ""
) -> str:
    return (
        f'<div class="field"><label for="{name}">{escape(label)}</label>'
        f'<input id="{name}" data-field="{name}" type="{input_type}" '
        f'value="{escape(value)}" /></div>'
    )


def _select(name: str, label: str, options: list[tuple[str, str]]) -> str:
    rendered = "".join(
        f'<option value="{escape(value)}">{escape(text)}</option>'
        for value, text in options
    )
    return (
        f'<div class="field"><label for="{name}">{escape(label)}</label>'
        f'<select id="{name}" data-field="{name}">'
        f'<option value="">Select {escape(label.lower())}</option>{rendered}'
        "</select></div>"
    )


def _textarea(name: str, label: str, placeholder: str, group: str = "") -> str:
    group_attr = f' data-group="{group}"' if group else ""
    return (
        f'<div class="field wide"><label for="{name}">{escape(label)}</label>'
        f'<textarea id="{name}" data-field="{name}"{group_attr} rows="3" '
        f'placeholder="{escape(placeholder)}"></textarea></div>'
    )


def _card(title: str, body: str) -> str:
    return (
        f'<section class="card"><h2>{escape(title)}</h2>'
        f'<div class="grid">{body}</div></section>'
    )


_PAGE_HEAD = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{brand} Diet Plan Generator</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 0;
             background: #0b0b0b; color: #f2f2f2; }
      header, footer { text-align: center; padding: 2rem; }
      h1 { color: #a4ff2e; font-size: 3rem; margin: 0; }
      main { max-width: 1100px; margin: 0 auto; padding: 1rem; }
      .card { border: 1px solid #3a5a12; border-radius: 8px; padding: 1.5rem;
              margin-bottom: 1.5rem; background: #141414; }
      .card h2 { color: #a4ff2e; margin-top: 0; }
      .grid { display: grid; gap: 1rem;
              grid-template-columns: repeat(auto-fill, minmax(260px, 1fr)); }
      .field { display: flex; flex-direction: column; gap: 0.4rem; }
      .field.wide { grid-column: 1 / -1; }
      input, select, textarea { padding: 0.5rem; background: #1f1f1f;
              color: #f2f2f2; border: 1px solid #333; border-radius: 4px; }
      button { width: 100%; padding: 1rem; font-size: 1.1rem; font-weight: bold;
               background: #a4ff2e; color: #000; border: 0; border-radius: 6px; }
      button:disabled { opacity: 0.6; }
      #toast { position: fixed; right: 1rem; bottom: 1rem; padding: 0.8rem 1rem;
               border-radius: 6px; display: none; }
      #toast.success { display: block; background: #a4ff2e; color: #000; }
      #toast.error { display: block; background: #c0392b; color: #fff; }
    </style>
  </head>
  <body>
    <header><h1>{brand}</h1><p>Diet Plan Generator</p></header>
    <main>
"""

_PAGE_TAIL = """      <button id="generate" onclick="generatePlan()">Generate PDF</button>
    </main>
    <footer>Powered by {brand} | Fuel Your Power</footer>
    <div id="toast"></div>
    <script>
      function showToast(kind, text) {
        const toast = document.getElementById('toast');
        toast.className = kind;
        toast.textContent = text;
        setTimeout(() => { toast.className = ''; }, 4000);
      }

      function collectPayload() {
        const payload = { meals: {} };
        document.querySelectorAll('[data-field]').forEach((el) => {
          const target = el.dataset.group === 'meals' ? payload.meals : payload;
          target[el.dataset.field] = el.value;
        });
        return payload;
      }

      function fileNameFrom(response) {
        const header = response.headers.get('Content-Disposition') || '';
        const encoded = header.match(/filename[*]=UTF-8''([^;]+)/i);
        if (encoded) {
          return decodeURIComponent(encoded[1]);
        }
        const match = header.match(/filename="([^"]+)"/);
        return match ? match[1] : 'DietPlan.pdf';
      }

      async function generatePlan() {
        const button = document.getElementById('generate');
        button.disabled = true;
        button.textContent = 'Generating PDF...';
        try {
          const response = await fetch('/diet-plans', {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify(collectPayload())
          });
          if (!response.ok) {
            const data = await response.json();
            showToast('error', typeof data.detail === 'string'
              ? data.detail : 'Failed to generate PDF. Please try again.');
            return;
          }
          const blob = await response.blob();
          const link = document.createElement('a');
          link.href = URL.createObjectURL(blob);
          link.download = fileNameFrom(response);
          link.click();
          URL.revokeObjectURL(link.href);
          showToast('success', '{generated}');
        } catch (err) {
          showToast('error', 'Failed to generate PDF. Please try again.');
        } finally {
          button.disabled = false;
          button.textContent = 'Generate PDF';
        }
      }
    </script>
  </body>
</html>
"""
