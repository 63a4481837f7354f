"""Route Modules — one file per concern, each with its own APIRouter."""
