# ---------------------------------------------------------------------------
# File: __init__.py
# Description:
#	scripthub: menu-driven script hub.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/02/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

__version__ = "0.1.0"
