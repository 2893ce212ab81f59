"""View rendering module for the widget page.

The presenter and controller hold the widget's UI state; the template
renderer turns that state into Jinja2 HTML for the page and HTMX swaps.
"""
