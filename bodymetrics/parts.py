# -------------------------------------------------------------
# Tracked body parts, display units and baseline colors
# -------------------------------------------------------------

# Display order for cards, forms and the goal editor
DEFAULT_PARTS = [
    "Chest",
    "Shoulders",
    "Arms",
    "Weight",
    "Thighs",
    "Calves",
    "Waist",
    "Body Fat %",
]

MAIN_CHART_PARTS = ["Chest", "Shoulders", "Arms", "Waist", "Thighs", "Calves"]
SECONDARY_CHART_PARTS = ["Weight", "Body Fat %"]

# Parts toggled on when the dashboard first opens
DEFAULT_SELECTION = ["Waist", "Chest", "Shoulders"]

PART_COLORS = {
    "Chest": "#ff0000",       # red
    "Shoulders": "#ffff00",   # yellow
    "Arms": "#ff7b00",        # orange
    "Waist": "#00ff00",       # green
    "Thighs": "#00a2ff",      # blue
    "Calves": "#af00ff",      # violet
    "Weight": "#ced4da",      # light grey
    "Body Fat %": "#ced4da",  # light grey
}


def unit_for(part: str) -> str:
    if part == "Weight":
        return "LBS"
    if part == "Body Fat %":
        return "%"
    return "IN"


def unit_suffix(part: str) -> str:
    """Short suffix appended to numbers: inches render as a double quote."""
    unit = unit_for(part)
    return '"' if unit == "IN" else unit
