import logging

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "An error occurred while generating domain names"


class GenerationSession:
    """Session-scoped state for one visitor of the generator page.

    ``state`` is any mutable mapping; the app passes ``st.session_state``.
    Keys: ``description``, ``suggestions``, ``generation_error`` and
    ``generating``.
    """

    def __init__(self, state, generator):
        self.state = state
        self.generator = generator
        if "description" not in state:
            state["description"] = ""
        if "suggestions" not in state:
            state["suggestions"] = []
        if "generation_error" not in state:
            state["generation_error"] = None
        if "generating" not in state:
            state["generating"] = False

    @property
    def description(self):
        return self.state["description"]

    def set_description(self, text):
        self.state["description"] = text

    @property
    def suggestions(self):
        return self.state["suggestions"]

    @property
    def error(self):
        return self.state["generation_error"]

    @property
    def generating(self):
        return self.state["generating"]

    @property
    def can_generate(self):
        return not self.generating and bool(self.description.strip())

    def run(self):
        """Generate suggestions for the current description.

        Returns False without touching state when generation is not allowed.
        """
        if not self.can_generate:
            return False

        self.state["generating"] = True
        self.state["generation_error"] = None
        try:
            self.state["suggestions"] = self.generator.generate(self.description)
        except Exception as e:
            logger.warning(f"Name generation failed: {e}")
            self.state["suggestions"] = []
            self.state["generation_error"] = str(e) or DEFAULT_ERROR_MESSAGE
        finally:
            self.state["generating"] = False
        return True
