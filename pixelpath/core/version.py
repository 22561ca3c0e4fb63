"""PixelPath - version and grid constants.

Keep this module tiny and dependency-free. It is imported by core, svg and ui
modules and must not have side effects.
"""

APP_NAME = "PixelPath"
APP_SHORT = "PXP"

APP_VERSION = "0.1.0"

# Paso de la grilla en unidades lógicas. El cursor se mueve de a un paso y el
# lienzo exportado mide grid_count * paso.
HORIZONTAL_STEP = 100
VERTICAL_STEP = 100

# Solo pantalla: offset fijo + escala NUM/DEN (el export usa unidades crudas).
LEFT_OFFSET = 100
TOP_OFFSET = 100
RENDER_NUMERATOR = 1
RENDER_DENOMINATOR = 2

# Cruz del cursor (unidades lógicas, antes de escalar) y grosor del pen (px).
CROSSHAIR_LENGTH = 20
CROSSHAIR_THICKNESS = 4

SVG_NS_URI = "http://www.w3.org/2000/svg"
