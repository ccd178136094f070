import io
import os

from flask import Flask, render_template, request, send_file

from compound_calc.data_models import PERIOD_UNITS, RATE_UNITS
from compound_calc.engine import MAX_TOTAL_MONTHS, compute, total_months_for
from compound_calc.formatter import format_currency, format_interest, is_highlighted
from compound_calc.image_export import DEFAULT_FILENAME, render_result_png
from compound_calc.utils import normalize_choice, parse_int

app = Flask(__name__)
app.config["ASSET_VERSION"] = os.environ.get("ASSET_VERSION", "1")
app.secret_key = os.environ.get("FLASK_SECRET_KEY", "dev-secret-key")

DEFAULT_FORM = {
    "initial_principal": "10000000",
    "monthly_deposit": "1000000",
    "period": "40",
    "period_unit": "years",
    "rate": "12",
    "rate_unit": "annual",
}

app.jinja_env.filters["currency"] = format_currency
app.jinja_env.filters["interest"] = format_interest
app.jinja_env.tests["highlighted"] = is_highlighted


def _form_values(form) -> dict:
    """Collect the submitted fields, falling back to the defaults for units."""
    values = {}
    for key in ("initial_principal", "monthly_deposit", "period", "rate"):
        values[key] = form.get(key, "").strip()
    values["period_unit"] = normalize_choice(form.get("period_unit"), PERIOD_UNITS, DEFAULT_FORM["period_unit"])
    values["rate_unit"] = normalize_choice(form.get("rate_unit"), RATE_UNITS, DEFAULT_FORM["rate_unit"])
    return values


def _period_error(values: dict):
    """Return a message when the period is too long to compute, else None."""
    months = total_months_for(parse_int(values["period"]), values["period_unit"])
    if months > MAX_TOTAL_MONTHS:
        return f"Investment period must be at most {MAX_TOTAL_MONTHS // 12} years ({MAX_TOTAL_MONTHS} months)."
    return None


def _run_calculation(values: dict):
    # empty or malformed numeric fields are read as 0 by the engine
    return compute(
        values["initial_principal"],
        values["monthly_deposit"],
        values["period"],
        values["period_unit"],
        values["rate"],
        values["rate_unit"],
    )


@app.route("/", methods=["GET", "POST"])
def index():
    result = None
    error = None
    values = dict(DEFAULT_FORM)

    if request.method == "POST":
        values = _form_values(request.form)
        error = _period_error(values)
        if error is None:
            try:
                result = _run_calculation(values)
            except Exception as exc:
                app.logger.exception("Calculation failed")
                error = str(exc)

    return render_template(
        "index.html",
        values=values,
        result=result,
        error=error,
        asset_version=app.config["ASSET_VERSION"],
    )


@app.post("/download")
def download():
    values = _form_values(request.form)
    error = _period_error(values)
    if error is not None:
        return {"error": error}, 400
    try:
        result = _run_calculation(values)
        image = render_result_png(result)
    except Exception as exc:
        app.logger.exception("Image export failed")
        return {"error": str(exc)}, 400
    return send_file(
        io.BytesIO(image),
        mimetype="image/png",
        as_attachment=True,
        download_name=DEFAULT_FILENAME,
    )


if __name__ == "__main__":
    print("Starting compound interest calculator web app...")
    app.run(host="0.0.0.0", port=8710, debug=True)
