import streamlit as st
from session import GenerationSession
from utils import escape_markdown, registrar_url, suggestions_frame

def generate_names_section(generator):
    session = GenerationSession(st.session_state, generator)

    description = st.text_area(
        "Describe your website",
        placeholder="✍️ Describe your website's purpose, target audience, and key features...",
        height=150,
        help="E.g., 'a bakery in Paris selling sourdough and pastries'",
        key="description_input"
    )
    session.set_description(description)

    if st.button("Generate Website Names ✨", disabled=session.generating, type="primary", width="stretch"):
        if not session.description.strip():
            st.warning("Please describe your website first.")
        else:
            with st.spinner("Creating Magic..."):
                session.run()

    if session.error:
        st.error(session.error)
        return

    if not session.suggestions:
        return

    st.subheader("Suggested Names")
    for suggestion in session.suggestions:
        name = escape_markdown(suggestion.name)
        with st.container(border=True):
            st.markdown(f"### {name}")
            for ext in suggestion.extensions:
                st.link_button(
                    f"🌐 {name}{escape_markdown(ext)}  ·  Check Availability →",
                    registrar_url(suggestion.name, ext),
                    width="stretch"
                )

    with st.expander("All candidate domains"):
        df = suggestions_frame(session.suggestions)
        st.dataframe(
            df[["domain", "url"]],
            column_config={"url": st.column_config.LinkColumn("Check Availability", display_text="Open GoDaddy")},
            width="stretch",
            hide_index=True
        )
