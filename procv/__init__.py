"""
procv - Cape Verde property listings and mortgage tools

Modules:
    - core: Settings, logging, exceptions and financial calculators
    - domain: Pydantic models and the property search/sort engine
    - application: Search sessions, catalog loading, leads and export services
    - ui: Streamlit pages and UI components
"""

__version__ = "1.4.0"
