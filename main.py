import logging

import streamlit as st
from name_generator import NameGenerator, create_backend
from sections.generate_names import generate_names_section
from utils import log_level

logging.basicConfig(
    level=log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

@st.cache_resource
def get_generator():
    return NameGenerator(create_backend())

def main():
    st.set_page_config(page_title="AI Website Name Generator", page_icon="🌐")
    st.title("AI Website Name Generator ✨")
    st.markdown("Generate and check available website names for your website in seconds! 🌐")

    generator = get_generator()
    if not generator.is_configured:
        st.warning("Gemini AI API key missing. Set GEMINI_API_KEY in the environment or a .env file. See https://ai.google.dev for details.")

    generate_names_section(generator)

    with st.expander("Tips for choosing a website name"):
        st.markdown("""
1. Choose short, memorable names for better brand recall
2. Ensure easy pronunciation and spelling
3. Consider SEO impact and keyword relevance
4. Verify trademark availability
5. Select the right TLD for your website purpose
""")

if __name__ == "__main__":
    main()
