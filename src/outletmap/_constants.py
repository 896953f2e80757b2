"""Internal constants shared across the library."""

BASE_URL = "https://findmcd-0-0-1.onrender.com"
OUTLETS_ENDPOINT = "/fetchOutlet"
CHATBOT_ENDPOINT = "/chatbot"

# Flat-plane degrees -> metres factor (metres per degree at the equator).
# Only valid for city-scale spans; do not replace with a geodesic distance.
METERS_PER_DEGREE = 111000

# ------------------------------------------------------------------
# Marker icons
# ------------------------------------------------------------------

MIN_ICON_SIZE = 30
MAX_ICON_SIZE = 40
FRAME_INTERVAL = 1 / 60

COLORFUL_ICON_URL = "/McDonald's_Logo_WebIcon.svg"
PLAIN_ICON_URL = "/McDonald's_Logo_WebIcon_white.png"
ICON_CLASS = "custom-icon-shadow"
BORDERED_ICON_CLASS = "bordered-icon"
POPUP_ANCHOR: tuple[int, int] = (0, -20)
POPUP_LINK_LABEL = "Open in Waze"

# ------------------------------------------------------------------
# Viewport
# ------------------------------------------------------------------

DEFAULT_CENTER: tuple[float, float] = (3.1319, 101.6841)
DEFAULT_ZOOM = 12
FLY_DURATION = 0.5

# ------------------------------------------------------------------
# Chat transcript
# ------------------------------------------------------------------

GREETING_MESSAGES: tuple[str, ...] = (
    "Hi! I'm Samantha, your virtual assistant for McDonald's Find McD. I can help you locate "
    "any store branch by name, location, or available facilities!",
    "You may hover over the location on the map to inspect the McDelivery support area and "
    "see if it's available near you.",
)
NO_MATCH_MESSAGE = "Sorry, I couldn't find a matching branch. Can I help you find it using other details?"
CONNECTION_ERROR_MESSAGE = "Sorry, I'm having trouble connecting to the server. Please try again later."
