# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	pyezelm: composable (state, message, update, view) programs.
#
# Notes:
#	- program/	composition primitives (tags, senders, slots, runtime)
#	- pages/	sub-programs (counter, text_input)
#	- app/		the composite (state, routing update, page-selecting view)
#	- ui/		Tk renderer + themed window
#	- core/		logging, telemetry, config
#
# ---------------------------------------------------------------------------

__version__ = "0.1.0"
