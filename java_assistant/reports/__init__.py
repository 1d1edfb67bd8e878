"""Text and Markdown renderers; each is a pure function of its inputs."""
