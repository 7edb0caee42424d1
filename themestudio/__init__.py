"""ThemeStudio - live design token themes for style-variable surfaces."""

__version__ = "0.3.0"
