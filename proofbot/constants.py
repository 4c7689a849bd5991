"""All magic values live here — no inline literals anywhere else."""

# HTTP surface
CALLBACK_PATH = "/callback"
SIGNATURE_HEADER = "X-Line-Signature"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = "3000"

# LINE content endpoint (binary payloads live on the api-data host)
LINE_CONTENT_URL = "https://api-data.line.me/v2/bot/message/%s/content"

# Event routing
EVENT_TYPE_MESSAGE = "message"
MESSAGE_TYPE_TEXT = "text"
MESSAGE_TYPE_IMAGE = "image"

# Image analysis
IMAGE_MIME_TYPE = "image/jpeg"
GEMINI_VISION_MODEL = "gemini-2.5-flash"
CLAUDE_VISION_MODEL = "claude-opus-4-6"
OPENAI_VISION_MODEL = "gpt-4o"
CLAUDE_MAX_TOKENS = 2048

ANALYSIS_PROMPT = (
    "Extract all of the text in this image, then report only the analysis. "
    "Do not include a fully corrected version of the text.\n"
    "\n"
    "Follow this response format strictly:\n"
    "\n"
    "[Extracted original text]\n"
    "(the full text read from the image, verbatim)\n"
    "\n"
    "[Typo check]\n"
    "- (wrong word) -> (correct word)\n"
    '(if there are none, write "No typos found.")\n'
    "\n"
    "[Grammar and phrasing analysis]\n"
    "- (awkward or incorrect sentence) -> (clear corrected sentence)\n"
    "(reason: briefly explain why it was wrong or why the new phrasing is better)\n"
    '(if there are none, write "The grammar is correct.")'
)

# Log / user-facing messages
MSG_SERVER_STARTING = "Starting LINE webhook server…"
MSG_LISTENING = "listening on %s"
MSG_VISION_BACKEND = "Vision backend: %s"
MSG_INVALID_SIGNATURE = "Rejected webhook call: invalid signature"
MSG_INVALID_SIGNATURE_DETAIL = "Invalid signature"
MSG_BATCH_FAILED = "Could not extract webhook events"
MSG_HANDLER_FAILED = "Event handler failed: %r"
MSG_ROUTE = "Event %s → %s"
MSG_IGNORED = "Ignored event: %s"
MSG_FETCHED_CONTENT = "Fetched %d bytes for message %s"
MSG_IMAGE_ANALYSIS_ERROR = "Image analysis failed for message %s"
MSG_IMAGE_ANALYSIS_FAILED = "image analysis failed: %s"
MSG_EMPTY_ANALYSIS = "empty response from vision model"
