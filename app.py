"""
HanyuLearn - HSK Chinese Vocabulary Review

Streamlit application for reviewing lesson vocabulary and example sentences
served by the HanyuLearn backend.

Usage:
    streamlit run app.py
"""

import logging
import math

import streamlit as st

from hanyulearn.config import load_settings
from hanyulearn.content import (
    FallbackContentSource,
    HanyuApiClient,
    LessonDetailLoader,
    ProgressReporter,
    RemoteContentSource,
    ReviewKind,
    TokenStore,
    fetch_resume,
)
from hanyulearn.review import Debouncer, ReviewController
from hanyulearn.viewer import (
    DEFAULT_THEME,
    get_card_css,
    render_example_card,
    render_progress_label,
    render_vocabulary_card,
    render_writing_pad,
)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)

st.set_page_config(
    page_title="HanyuLearn",
    page_icon="📖",
    layout="centered",
    initial_sidebar_state="expanded",
)

VIEW_MODES = {
    "Bài học": "lesson",
    "Từ vựng": "vocabulary",
    "Câu mẫu": "grammar",
}


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "settings" not in st.session_state:
        st.session_state.settings = load_settings()

    settings = st.session_state.settings

    if "client" not in st.session_state:
        st.session_state.client = HanyuApiClient(
            base_url=settings.api_base_url,
            token_store=TokenStore(token=settings.access_token),
            timeout=settings.request_timeout,
        )

    if "lesson_id" not in st.session_state:
        pointer = fetch_resume(st.session_state.client)
        st.session_state.lesson_id = pointer.lesson_id if pointer else settings.default_lesson_id

    if "view_mode" not in st.session_state:
        st.session_state.view_mode = "lesson"

    if "controllers" not in st.session_state:
        st.session_state.controllers = {}


def get_controller(kind: ReviewKind) -> ReviewController:
    """Controller for the current lesson; created and loaded on first use."""
    key = (kind, st.session_state.lesson_id)
    controllers = st.session_state.controllers
    if key not in controllers:
        settings = st.session_state.settings
        client = st.session_state.client
        controller = ReviewController(
            kind=kind,
            lesson_id=st.session_state.lesson_id,
            source=FallbackContentSource(RemoteContentSource(client)),
            reporter=ProgressReporter(client),
            debouncer=Debouncer(settings.progress_debounce),
        )
        with st.spinner("Đang tải..."):
            controller.load()
        controllers[key] = controller
    return controllers[key]


def select_lesson(lesson_id: int):
    """Switch lesson; screens of the previous lesson are closed."""
    for controller in st.session_state.controllers.values():
        controller.close()
    st.session_state.controllers = {}
    st.session_state.lesson_id = lesson_id
    st.rerun()


# -----------------------------------------------------------------------------
# Sidebar
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the sidebar with lesson selection and view mode."""
    st.sidebar.title("📖 HanyuLearn")

    lesson_id = st.sidebar.number_input(
        "Bài học",
        min_value=1,
        value=int(st.session_state.lesson_id),
        step=1,
    )
    if lesson_id != st.session_state.lesson_id:
        select_lesson(int(lesson_id))

    st.sidebar.divider()

    labels = list(VIEW_MODES)
    current = list(VIEW_MODES.values()).index(st.session_state.view_mode)
    label = st.sidebar.radio("Chế độ", labels, index=current)
    st.session_state.view_mode = VIEW_MODES[label]


# -----------------------------------------------------------------------------
# Lesson Detail View
# -----------------------------------------------------------------------------

def get_lesson_loader() -> LessonDetailLoader:
    """Overview loader for the current lesson; fetched once per lesson."""
    loader = st.session_state.get("lesson_loader")
    if loader is None or loader.lesson_id != st.session_state.lesson_id:
        loader = LessonDetailLoader(st.session_state.client, st.session_state.lesson_id)
        with st.spinner("Đang tải bài học..."):
            loader.load()
        st.session_state.lesson_loader = loader
    return loader


def render_lesson_view():
    """Render the lesson overview with activities."""
    loader = get_lesson_loader()

    if loader.error:
        st.error(loader.error)
        if st.button("Thử lại"):
            with st.spinner("Đang tải bài học..."):
                loader.retry()
            st.rerun()
        return

    overview = loader.overview
    progress = loader.progress
    st.title(overview.title)
    st.caption(f"HSK {overview.hsk_level or 1}")
    if overview.description:
        st.markdown(overview.description)

    st.progress(min(progress.percent, 100) / 100)
    st.markdown(f"**{progress.activities_completed}/{progress.activities_total}** hoạt động")

    for activity in loader.activities():
        col1, col2 = st.columns([3, 1])
        with col1:
            st.markdown(f"**{activity.title}**  \n{activity.subtitle}")
        with col2:
            target = {"vocabulary": "vocabulary", "sentences": "grammar"}.get(activity.id)
            if target and st.button("Mở", key=f"activity_{activity.id}", disabled=activity.status == "locked"):
                st.session_state.view_mode = target
                st.rerun()

    if st.button(loader.main_button_label(), type="primary", use_container_width=True):
        st.session_state.view_mode = "vocabulary"
        st.rerun()


# -----------------------------------------------------------------------------
# Review Views
# -----------------------------------------------------------------------------

def render_review_view(kind: ReviewKind):
    """Render the vocabulary or example sentence review screen."""
    controller = get_controller(kind)
    info = controller.info

    st.title(f"HSK {info.hsk_level} – {info.title}")
    if controller.is_fallback:
        st.markdown(
            '<span class="review-fallback">Không tải được dữ liệu, đang dùng nội dung mẫu</span>',
            unsafe_allow_html=True,
        )

    st.markdown(get_card_css(DEFAULT_THEME), unsafe_allow_html=True)

    completed, total = controller.progress()
    st.progress(completed / total)
    st.markdown(render_progress_label(completed, total), unsafe_allow_html=True)

    outer, inner = controller.current()
    render = render_vocabulary_card if kind == ReviewKind.VOCABULARY else render_example_card
    st.markdown(
        render(outer, inner, mastered=controller.is_mastered(), favorite=controller.is_favorite()),
        unsafe_allow_html=True,
    )

    render_review_controls(controller)

    if controller.writing_mode:
        render_writing_section(controller)


def render_review_controls(controller: ReviewController):
    """Render prev/next and flag buttons."""
    col1, col2, col3, col4, col5 = st.columns(5)

    with col1:
        if st.button("←", use_container_width=True, disabled=not controller.has_previous()):
            controller.previous()
            st.rerun()
    with col2:
        label = "✓ Đã nhớ" if controller.is_mastered() else "Đã nhớ"
        if st.button(label, use_container_width=True):
            controller.toggle_mastered()
            st.rerun()
    with col3:
        label = "★" if controller.is_favorite() else "☆"
        if st.button(label, use_container_width=True):
            controller.toggle_favorite()
            st.rerun()
    with col4:
        if st.button("✍", use_container_width=True):
            controller.toggle_writing_mode()
            st.rerun()
    with col5:
        if st.button("→", use_container_width=True, disabled=not controller.has_next()):
            controller.next()
            st.rerun()


def render_writing_section(controller: ReviewController):
    """Render the writing pad; strokes are entered as point lists."""
    st.divider()
    st.subheader("Luyện viết")
    st.markdown(render_writing_pad(controller.strokes.render()), unsafe_allow_html=True)

    points = st.text_input(
        "Nét vẽ (x,y x,y ...)",
        key=f"stroke_input_{controller.kind.value}",
        placeholder="20,20 100,100 180,40",
    )
    col1, col2 = st.columns(2)
    with col1:
        if st.button("Thêm nét", use_container_width=True) and points:
            add_stroke(controller, points)
            st.rerun()
    with col2:
        if st.button("Xóa", use_container_width=True):
            controller.strokes.clear()
            st.rerun()


def add_stroke(controller: ReviewController, points: str):
    """Replay a point list as one drag gesture."""
    try:
        coords = [tuple(float(v) for v in pair.split(",")) for pair in points.split()]
    except ValueError:
        st.warning("Định dạng không hợp lệ")
        return
    if not coords or any(len(c) != 2 or not all(math.isfinite(v) for v in c) for c in coords):
        st.warning("Định dạng không hợp lệ")
        return

    strokes = controller.strokes
    strokes.begin(*coords[0])
    for x, y in coords[1:]:
        strokes.move(x, y)
    strokes.end()


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()
    render_sidebar()

    if st.session_state.view_mode == "lesson":
        render_lesson_view()
    elif st.session_state.view_mode == "vocabulary":
        render_review_view(ReviewKind.VOCABULARY)
    elif st.session_state.view_mode == "grammar":
        render_review_view(ReviewKind.GRAMMAR)


if __name__ == "__main__":
    main()
