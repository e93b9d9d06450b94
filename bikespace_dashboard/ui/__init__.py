"""
Dash wiring: builds the store, the page layout and the widgets.
"""
