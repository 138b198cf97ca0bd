import json
import logging
import streamlit as st
from ingredient_display.locales import LOCALES, active_locale, plural_policy_for
from ingredient_display.scaling import RenderMode, extract_servings_num, servings_scale
from ingredient_display.text import render as render_ingredient, render_flat

log = logging.getLogger(__name__)

_DEF_SERVINGS = 2

SAMPLE = {
    "slug": "apfelkuchen",
    "servings": "4 Portionen",
    "ingredients": [
        {"quantity": 2, "unit": {"name": "cup", "pluralName": "cups", "fraction": False},
         "food": {"name": "apple", "pluralName": "apples"}},
        {"quantity": "1.5", "unit": {"name": "tablespoon", "pluralName": "tablespoons",
                                     "abbreviation": "tbsp", "useAbbreviation": True, "fraction": True},
         "food": {"name": "sugar"}, "note": "<b>fein</b>"},
        {"quantity": 0.0005, "unit": {"name": "gram", "abbreviation": "g", "useAbbreviation": True, "fraction": False},
         "food": {"name": "saffron"}},
        {"quantity": 1, "referencedRecipe": {"slug": "muerbeteig", "name": "Mürbeteig"}},
        {"note": "Puderzucker zum Bestäuben"},
    ],
}


def _load(txt: str):
    data = json.loads(txt)
    if isinstance(data, list):
        return {"ingredients": data}
    if not isinstance(data, dict):
        raise ValueError("expected an object or a list of ingredients")
    return data


def render():
    st.header("Zutaten")
    txt = st.text_area("Rezept (JSON)", value=json.dumps(SAMPLE, ensure_ascii=False, indent=2), height=300)
    try:
        recipe = _load(txt)
    except ValueError as e:
        log.info("invalid recipe json: %s", e)
        st.error(f"Ungültiges JSON: {e}")
        return

    locales = [v for v, _, _ in LOCALES]
    names = {v: n for v, n, _ in LOCALES}
    current = active_locale()
    c1, c2, c3, c4 = st.columns(4)
    base = extract_servings_num(recipe.get("servings")) or _DEF_SERVINGS
    c1.metric("Basis-Portionen", f"{base:g}")
    target = c2.number_input("Portionen", min_value=1, value=max(1, round(base)), step=1)
    locale = c3.selectbox("Sprache", locales, index=locales.index(current) if current in locales else 0,
                          format_func=lambda v: names[v])
    markup = c4.toggle("Brüche formatieren", value=True)

    scale = servings_scale(base, target)
    policy = plural_policy_for(locale)
    mode = RenderMode.of(markup)
    container = recipe.get("group") or "home"

    st.caption(f"Faktor {scale:g} · Plural: {policy.value}")
    lines, rows = [], []
    for ing in recipe.get("ingredients") or []:
        if not isinstance(ing, dict):
            log.info("skipping ingredient %r", ing)
            st.warning(f"Übersprungen (kein Objekt): {ing!r}")
            continue
        fields = render_ingredient(ing, scale, mode, container_id=container, policy=policy)
        line = render_flat(ing, scale, mode, policy=policy)
        if fields.recipe_link:
            line = f"{line} ({fields.recipe_link})"
        st.markdown(f"- {line}", unsafe_allow_html=True)
        lines.append(render_flat(ing, scale, RenderMode.PLAIN, policy=policy))
        rows.append(fields.as_dict())

    with st.expander("Felder"):
        st.dataframe(rows, use_container_width=True)

    st.download_button("Als TXT speichern", data="\n".join(lines), file_name=f"{recipe.get('slug') or 'zutaten'}.txt")
