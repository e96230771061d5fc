import os

import requests
import streamlit as st
import streamlit.components.v1 as components

API_BASE = os.getenv("DOCS_SERVICE_API_BASE", os.getenv("API_BASE", "http://localhost:8080")).rstrip("/")
REQUEST_TIMEOUT = float(os.getenv("DOCS_SERVICE_UI_TIMEOUT", "30"))

PAGES = {
    "Documentación (README.md)": "/",
    "Guía (GUIA.md)": "/guia",
    "Saludo": "/saludo",
}


def fetch_page(path: str) -> tuple[int, str, str]:
    """Fetch one service endpoint; returns (status, content type, body).

    Network failures are reported as status 0 with the error text as body
    so the page can show them instead of crashing.
    """
    try:
        resp = requests.get(f"{API_BASE}{path}", timeout=REQUEST_TIMEOUT)
    except requests.RequestException as e:
        return 0, "", f"Failed to connect to API: {e}"
    content_type = resp.headers.get("content-type", "")
    return resp.status_code, content_type, resp.text


def main() -> None:
    st.set_page_config(page_title="Documentation Service", page_icon="📘", layout="wide")
    st.title("📘 Documentation Service")
    st.caption(f"API base: {API_BASE}")

    label = st.radio("Page", list(PAGES), horizontal=True)
    path = PAGES[label]

    with st.spinner(f"Fetching {path} ..."):
        status, content_type, body = fetch_page(path)

    if status != 200:
        st.error(body if status == 0 else f"Request failed: {status} {body}")
        return

    if content_type.startswith("text/html"):
        components.html(body, height=800, scrolling=True)
        with st.expander("HTML source"):
            st.code(body, language="html")
    else:
        st.success(body)


if __name__ == "__main__":
    main()
