# Feedback event kinds (stringly-typed; canonical list lives here)

FX_SELECT = "select"
FX_PLACE = "place"
FX_ERROR = "error"
FX_ZOOM_IN = "zoom-in"
FX_ZOOM_OUT = "zoom-out"

FEEDBACK_KINDS = (FX_SELECT, FX_PLACE, FX_ERROR, FX_ZOOM_IN, FX_ZOOM_OUT)

# client -> place API
API_TIME_TO_WAIT = "/api/place/time.json"
API_DRAW = "/api/place/draw.json"
