# app.py
# Centered recipient form -> AI gift ideas.
# Shows generic fallback ideas (plus the reason) whenever the AI pipeline fails.
# "Generate Different Ideas" reruns the same profile asking for new suggestions.

import logging
from typing import Any, Dict, List, Optional

import streamlit as st
from pydantic import ValidationError

from giftideas.config import LOG_LEVEL
from giftideas.diagnostics import check_env, probe_connection_sync
from giftideas.generator import generate_gift_ideas_sync
from giftideas.models import GenerationResult, GiftIdea, RecipientProfile


logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

st.set_page_config(page_title="Birthday Gift Generator", page_icon="🎁", layout="wide")

GENDERS = ["Male", "Female", "Non-binary", "Not specified"]
RELATIONSHIPS = {
    "friend": "Friend",
    "family": "Family Member",
    "partner": "Partner/Spouse",
    "colleague": "Colleague",
    "other": "Other",
}
BUDGETS = ["Under $25", "$25-$50", "$50-$100", "$100-$200", "$200+"]
GIFT_TYPES = {
    "Any": "Any",
    "Experiences": "Experiences (e.g., concert tickets)",
    "Physical": "Physical gifts (e.g., gadgets)",
    "DIY": "DIY/Handmade",
    "Sentimental": "Sentimental items",
    "Practical": "Practical/Useful items",
}

FIELD_LABELS = {
    "recipient_name": "Name",
    "age": "Age",
    "gender": "Gender",
    "relationship": "Relationship",
    "interests": "Interests",
    "budget": "Budget",
    "preferred_gift_type": "Preferred gift type",
}


def _init_state() -> None:
    defaults = {
        "recipient_name": "",
        "age": "",
        "gender": "Not specified",
        "relationship": "friend",
        "interests": "",
        "budget": "$25-$50",
        "preferred_gift_type": "Any",
        "profile": None,
        "result": None,
        "regenerate_count": 0,
        "form_errors": {},
    }
    for k, v in defaults.items():
        if k not in st.session_state:
            st.session_state[k] = v


def _build_profile() -> Optional[RecipientProfile]:
    """Validates the form. Stores per-field messages and returns None on failure."""
    try:
        profile = RecipientProfile(**{k: st.session_state.get(k, "") or "" for k in FIELD_LABELS})
    except ValidationError as e:
        errors: Dict[str, str] = {}
        for err in e.errors():
            field = str(err["loc"][0])
            errors[field] = f"{FIELD_LABELS.get(field, field)} is required"
        st.session_state["form_errors"] = errors
        return None

    st.session_state["form_errors"] = {}
    return profile


def _run(profile: RecipientProfile, is_regenerate: bool) -> GenerationResult:
    spinner = "Generating new ideas..." if is_regenerate else "Generating ideas..."
    with st.status(spinner, expanded=False):
        return generate_gift_ideas_sync(profile, is_regenerate=is_regenerate)


def _field_error(field: str) -> None:
    msg = st.session_state["form_errors"].get(field)
    if msg:
        st.caption(f":red[{msg}]")


def _render_badges(label: str, values: List[str]) -> None:
    if not values:
        return
    st.markdown(f"**{label}** " + " ".join(f"`{v}`" for v in values))


def _render_ideas(ideas: List[GiftIdea]) -> None:
    cols = st.columns(2)
    for idx, gift in enumerate(ideas):
        with cols[idx % 2]:
            with st.container(border=True):
                st.subheader(gift.name or "Gift idea")
                if gift.description:
                    st.write(gift.description)
                if gift.price_range:
                    st.write(f"**Price:** {gift.price_range}")
                if gift.reason:
                    st.write(f"🎁 {gift.reason}")
                _render_badges("Recommended brands:", gift.recommended_brands)
                _render_badges("Where to buy:", gift.where_to_buy)


def _render_form() -> None:
    st.subheader("Tell us about the birthday person")

    with st.form("gift_form", clear_on_submit=False):
        c1, c2 = st.columns(2)
        with c1:
            st.text_input("Recipient's Name", key="recipient_name", placeholder="Enter name")
            _field_error("recipient_name")
            st.selectbox("Gender", GENDERS, key="gender")
            _field_error("gender")
            st.selectbox("Budget", BUDGETS, key="budget")
            _field_error("budget")
        with c2:
            st.text_input("Age", key="age", placeholder="Enter age")
            _field_error("age")
            st.selectbox(
                "Your Relationship",
                list(RELATIONSHIPS),
                format_func=lambda k: RELATIONSHIPS[k],
                key="relationship",
            )
            _field_error("relationship")
            st.selectbox(
                "Preferred Gift Type",
                list(GIFT_TYPES),
                format_func=lambda k: GIFT_TYPES[k],
                key="preferred_gift_type",
            )
            _field_error("preferred_gift_type")

        st.text_area(
            "Interests & Hobbies",
            key="interests",
            placeholder="What do they enjoy? (e.g., cooking, hiking, reading sci-fi, playing guitar)",
        )
        _field_error("interests")

        submitted = st.form_submit_button("✨ Generate Gift Ideas", use_container_width=True)

    if submitted:
        profile = _build_profile()
        if profile is None:
            st.rerun()
        st.session_state["profile"] = profile
        st.session_state["regenerate_count"] = 0
        st.session_state["result"] = _run(profile, is_regenerate=False)
        st.rerun()


def _render_results(result: GenerationResult) -> None:
    is_fallback = bool(result.fallback)
    count = st.session_state.get("regenerate_count", 0)

    if is_fallback:
        st.info(
            "**Using generic gift suggestions**\n\n"
            "We're showing general gift ideas while our AI service is unavailable. "
            "These aren't personalized to your specific request."
        )
        if result.error:
            st.caption(result.error)

    st.header("Suggested Gift Ideas" if is_fallback else "Your Gift Ideas")
    if is_fallback:
        st.write("Here are some popular gift suggestions while we work on our AI service")
    else:
        set_label = f" (Set {count + 1})" if count > 0 else ""
        st.write(f"Here are some personalized gift suggestions{set_label}")

        if st.button("✨ Generate Different Ideas"):
            profile = st.session_state.get("profile")
            if profile is not None:
                st.session_state["regenerate_count"] = count + 1
                st.session_state["result"] = _run(profile, is_regenerate=True)
                st.rerun()

    _render_ideas(result.data or [])

    if st.button("Start Over"):
        for k in ("profile", "result"):
            st.session_state[k] = None
        st.session_state["regenerate_count"] = 0
        st.rerun()


def _render_diagnostics() -> None:
    with st.expander("Diagnostics"):
        st.json(check_env())
        if st.button("Test AI connection"):
            st.json(probe_connection_sync())


_init_state()

st.title("🎁 Birthday Gift Generator")
st.caption("Find the perfect birthday gift with the help of AI")

left, center, right = st.columns([1, 2, 1])

with center:
    result: Any = st.session_state.get("result")
    if result is None:
        _render_form()
    else:
        _render_results(result)

    _render_diagnostics()
