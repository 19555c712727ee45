"""Journal Taxonomy Browser."""

import sys
from pathlib import Path

# Add project root to path (for streamlit which runs this file directly)
_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(_root))

import plotly.graph_objects as go  # noqa: E402
import streamlit as st  # noqa: E402
from loguru import logger  # noqa: E402

from app.container import container  # noqa: E402
from app.errors import ApplicationError  # noqa: E402
from web.api import featured, feed, taxonomy  # noqa: E402
from web.api.errors import NotFoundError, ValidationError  # noqa: E402

# Ensure container is initialized
container.init()

st.set_page_config(page_title="Journal Taxonomy", page_icon="📚", layout="wide")

TYPE_BADGES = {
    "Featured Article": "⭐",
    "Most Shared Article": "🔁",
    "Most Viewed Article": "👀",
}


@st.cache_data(ttl=600, show_spinner="Loading categories...")
def get_categories(journal: str | None) -> dict[str, list[str]]:
    """Top and second level categories via views."""
    logger.info("Loading categories for {}", journal)
    return taxonomy.get_top_level_categories(journal).categories


@st.cache_data(ttl=600, show_spinner=False)
def get_counts(journal: str | None, path: tuple[str, ...]) -> dict:
    """Counts for a category and its children via views."""
    return taxonomy.get_category_counts(journal, list(path)).model_dump()


def counts_chart(items: list[dict], title: str = "") -> go.Figure:
    items = sorted((i for i in items if i["count"] is not None), key=lambda i: i["count"], reverse=True)
    return go.Figure(
        go.Bar(
            x=[i["count"] for i in items],
            y=[i["name"] for i in items],
            orientation="h",
            marker_color="#3C63AF",
            text=[i["count"] for i in items],
            textposition="outside",
        )
    ).update_layout(
        title=title,
        yaxis=dict(autorange="reversed"),
        margin=dict(t=40, b=20, l=200, r=20),
        height=max(300, 28 * len(items)),
    )


def categories_tab(journal: str | None):
    """Category browser tab."""
    categories = get_categories(journal)
    if not categories:
        st.info("No categories indexed for this journal.")
        return

    root = get_counts(journal, ())
    st.metric("Articles", root["count"] if root["count"] is not None else "n/a")
    st.plotly_chart(counts_chart(root["children"], "Articles per top-level category"), width="stretch")

    top = st.selectbox("Top-level category", list(categories))
    if top:
        try:
            data = get_counts(journal, (top,))
        except NotFoundError:
            st.warning(f"{top} is not in the full category tree yet.")
            return
        st.plotly_chart(counts_chart(data["children"], f"Articles in {top}"), width="stretch")


def featured_tab(journal: str | None):
    """Featured article tab."""
    if not journal:
        st.info("Select a journal to see featured articles.")
        return

    categories = get_categories(journal)
    subject_areas = sorted({s for subs in categories.values() for s in subs} | set(categories))
    if not subject_areas:
        st.info("No subject areas for this journal.")
        return

    subject_area = st.selectbox("Subject area", subject_areas)
    resp = featured.get_featured_article(journal, subject_area)
    if resp.article is None:
        st.info(f"No featured article for {subject_area}.")
        return

    article = resp.article
    st.subheader(f"{TYPE_BADGES.get(article.type, '')} {article.type}")
    st.markdown(f"**{article.title or article.doi}**  \n`{article.doi}`")
    if article.striking_image_uri:
        st.image(article.striking_image_uri, width=320)

    overrides = featured.get_featured_overrides(journal)
    if overrides.items:
        with st.expander(f"Manual overrides ({len(overrides.items)})"):
            st.table([i.model_dump() for i in overrides.items])


def feed_tab():
    """Article feed preview tab."""
    col1, col2, col3 = st.columns(3)
    category = col1.text_input("Category") or None
    author = col2.text_input("Author") or None
    max_results = col3.number_input("Max results", min_value=1, max_value=200, value=30)
    extended = st.checkbox("Extended", value=False)

    resp = feed.get_feed(category=category, author=author, max_results=int(max_results), extended=extended)
    st.caption(f"{resp.title} · {len(resp.entries)} entries")
    for entry in resp.entries:
        authors = ", ".join(a.name for a in entry.authors)
        st.markdown(f"**{entry.title}**  \n{authors} · {entry.published or ''}  \n`{entry.id}`")


def main():
    st.title("📚 Journal Taxonomy")

    journal = st.sidebar.text_input("Journal key", value="") or None

    tab1, tab2, tab3 = st.tabs(["🗂️ Categories", "⭐ Featured", "📰 Feed"])
    try:
        with tab1:
            categories_tab(journal)
        with tab2:
            featured_tab(journal)
        with tab3:
            feed_tab()
    except ValidationError as e:
        st.error(e.message)
    except ApplicationError as e:
        logger.exception("Request failed")
        st.error(f"Could not load data: {e.message}")


main()
