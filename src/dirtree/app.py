"""Streamlit UI for dirtree."""

from __future__ import annotations

from pathlib import Path

import streamlit as st

from dirtree.tree_builder import RootAccessError, build_tree
from dirtree.tree_renderer import format_tree

_PREVIEW_MAX_LINES = 1000


def _qp(key: str, default: str = "") -> str:
    """Read a query parameter, returning *default* if absent."""
    params = st.query_params
    return params.get(key, default)


def main() -> None:
    st.set_page_config(
        page_title="dirtree",
        page_icon="🌳",
        layout="wide",
    )

    st.title("dirtree")
    st.caption("Show the structure of a local directory as an ASCII tree.")

    path = st.text_input(
        "Directory",
        value=_qp("path"),
        placeholder=str(Path.cwd()),
    )
    include_files = st.checkbox(
        "Include files",
        value=_qp("files") == "1",
        help="List plain files with their size next to the directories.",
    )

    show_clicked = st.button("Show tree", type="primary", use_container_width=True)

    if show_clicked and path:
        _run_tree(path.strip(), include_files)
    elif show_clicked:
        st.error("Please enter a directory path.")

    # Show previous result after rerun (e.g. download button click)
    if not show_clicked and "result" in st.session_state:
        _show_result(st.session_state["result"])


def _run_tree(path: str, include_files: bool) -> None:
    try:
        with st.spinner("Scanning directory..."):
            nodes = build_tree(path, include_files)
    except RootAccessError as exc:
        st.error(f"Cannot read directory: {exc}")
        return

    if not nodes:
        st.info("The directory has nothing to show.")
        st.session_state.pop("result", None)
        return

    name = Path(path).resolve().name or "root"
    st.session_state["result"] = {
        "tree": format_tree(nodes),
        "filename": f"{name}_tree.txt",
    }
    _show_result(st.session_state["result"])


def _show_result(result: dict) -> None:
    """Display download button and preview from a stored result."""
    tree_output = result["tree"]

    st.download_button(
        label="Download tree",
        data=tree_output,
        file_name=result["filename"],
        mime="text/plain",
        use_container_width=True,
    )

    preview_lines = tree_output.splitlines()
    with st.expander("Preview", expanded=True):
        if len(preview_lines) > _PREVIEW_MAX_LINES:
            st.code("\n".join(preview_lines[:_PREVIEW_MAX_LINES]), language="text")
            st.caption(
                f"Preview is truncated to {_PREVIEW_MAX_LINES:,} lines "
                f"(total {len(preview_lines):,} lines). "
                "Download the file for the full tree."
            )
        else:
            st.code(tree_output, language="text")


if __name__ == "__main__":
    main()
