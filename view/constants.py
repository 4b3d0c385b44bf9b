# view/constants.py
# Shared view-level constants for the response chart

PLOT_BG = "white"          # plot background
AXIS_COLOR = "black"       # axis, tick labels and grid lines
GRID_ALPHA = 0.35
CURVE_WIDTH = 2
MARKER_COLOR = "black"     # inspected point marker
MARKER_SIZE = 9

X_AXIS_LABEL = "Frequency (Hz)"
Y_AXIS_LABEL = "Sound Pressure (dB)"

PLACEHOLDER_TEXT = "Select a speaker from the sidebar"
