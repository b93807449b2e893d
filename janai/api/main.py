import logging
import os
import time
import uuid
from typing import Dict, Any, List, Optional
from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel

# --- CORE ENGINE ---
from janai.decision.classifier import get_classifier
from janai.history.scan_history import ScanHistory
from janai.routing.departments import file_complaint
from janai.routing.intent import detect_intent, detect_concern_type
from janai.documents.analysis import (
    generate_system_instructions,
    classify_document,
    extract_key_topics,
)
from janai.schemes.eligibility import check_eligibility
# --- LLM BOUNDARY ---
from janai.llm.config import load_settings, ConfigurationError
from janai.llm.providers import LLMProvider, build_provider
from janai.llm.companion import CivicCompanion
from janai.llm.sessions import CompanionSessions
# --- TELEMETRY ---
from janai.telemetry import (
    init_telemetry,
    emit_classification_telemetry,
    emit_exception_telemetry,
)

# --- 1. SETUP AUDIT LOGGING ---
logging.basicConfig(
    filename=os.getenv("JANAI_AUDIT_LOG", "audit.log"),
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
audit_logger = logging.getLogger("audit")
logger = logging.getLogger("janai.api")

# --- 2. Swagger UI Metadata ---
tags_metadata = [
    {
        "name": "Scam Shield",
        "description": "Rule-based scam scoring for SMS text and caller descriptions.",
    },
    {
        "name": "Civic Services",
        "description": "Complaint routing, document guidance, intent detection and scheme eligibility.",
    },
    {
        "name": "Companion",
        "description": "Chat with the civic assistant through the configured LLM provider.",
    },
    {
        "name": "System",
        "description": "Health checks and operational metadata.",
    },
]

app = FastAPI(
    title="JanAI Civic Safety Engine",
    description="""
    **Civic services backend** for the JanAI citizen assistant.

    * **Scam Shield:** deterministic keyword and structure scoring (low / medium / high / critical).
    * **Auto-Routing:** complaints are routed to the responsible department.
    * **Document Guidance:** classification, key topics and next steps for uploaded documents.
    * **Companion:** thin, retry-bounded access to Gemini, Groq or OpenAI.
    """,
    version="1.0.0",
    openapi_tags=tags_metadata,
    docs_url="/docs",
    redoc_url="/redoc"
)

init_telemetry()

scan_history = ScanHistory(max_entries=int(os.getenv("JANAI_HISTORY_LIMIT", "500")))

# Global variable to hold the provider instance
_provider: Optional[LLMProvider] = None


def get_provider() -> LLMProvider:
    """
    Lazy loader for the LLM provider.
    Settings are resolved on first use so the scam endpoints work without keys.
    """
    global _provider
    if _provider is None:
        _provider = build_provider(load_settings())
    return _provider


chat_sessions = CompanionSessions(
    factory=lambda: CivicCompanion(get_provider()),
    max_sessions=int(os.getenv("JANAI_CHAT_SESSIONS", "1000")),
)


def get_companion(session_id: str) -> CivicCompanion:
    return chat_sessions.get(session_id)


# --- 3. MIDDLEWARE: AUDIT TRAIL ---
@app.middleware("http")
async def audit_middleware(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    client_host = request.client.host if request.client else "unknown"
    audit_logger.info(
        f"METHOD={request.method} PATH={request.url.path} "
        f"STATUS={response.status_code} CLIENT={client_host} "
        f"DURATION={process_time:.4f}s"
    )
    return response


# --- DATA MODELS ---
class SmsScanRequest(BaseModel):
    text: str


class CallScanRequest(BaseModel):
    caller_info: str


class ClassificationResponse(BaseModel):
    is_flagged: bool
    confidence_percent: float
    risk_tier: str
    indicators: List[str]
    explanation: str
    recommendation: str


class ComplaintRequest(BaseModel):
    type: str
    description: str
    location: Optional[str] = None


class DocumentRequest(BaseModel):
    content: str
    file_name: str = "document"


class IntentRequest(BaseModel):
    message: str


class EligibilityRequest(BaseModel):
    scheme: Dict[str, Any]
    profile: Optional[Dict[str, Any]] = None


class ChatRequest(BaseModel):
    message: str
    session_id: Optional[str] = None


# --- ENDPOINTS ---

def _scan(scan_type: str, text: str) -> Dict[str, Any]:
    classifier = get_classifier()
    if scan_type == "call":
        outcome = classifier.check_caller(text)
    else:
        outcome = classifier.classify(text)
    scan_history.record(scan_type, text, outcome)

    emit_classification_telemetry(
        confidence_percent=outcome.confidence_percent,
        risk_tier=outcome.risk_tier.value,
        indicator_count=len(outcome.indicators),
        source=scan_type,
    )
    return outcome.to_dict()


@app.post("/scan/sms", response_model=ClassificationResponse, tags=["Scam Shield"])
def scan_sms(request: SmsScanRequest):
    """
    Score an SMS for scam indicators.
    """
    return _scan("sms", request.text)


@app.post("/scan/call", response_model=ClassificationResponse, tags=["Scam Shield"])
def scan_call(request: CallScanRequest):
    """
    Score a caller description (number, claimed identity, what they asked for).
    """
    return _scan("call", request.caller_info)


@app.get("/scan/history", tags=["Scam Shield"])
def scan_history_list():
    return {"scans": [entry.to_dict() for entry in scan_history.entries()]}


@app.post("/complaints", tags=["Civic Services"])
def create_complaint(request: ComplaintRequest):
    try:
        complaint = file_complaint(
            complaint_type=request.type,
            description=request.description,
            location=request.location,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"Complaint routed to {complaint.department}")
    return {"success": True, "complaint": complaint.to_dict()}


@app.post("/documents/analyze", tags=["Civic Services"])
def analyze_document(request: DocumentRequest):
    if not request.content or not request.content.strip():
        raise HTTPException(status_code=400, detail="Document content is required")

    return {
        "system_instructions": generate_system_instructions(request.content, request.file_name),
        "categories": sorted(classify_document(request.content)),
        "key_topics": extract_key_topics(request.content),
    }


@app.post("/intent", tags=["Civic Services"])
def intent(request: IntentRequest):
    detected = detect_intent(request.message)
    return {
        "intent": detected.to_dict(),
        "concern_type": detect_concern_type(request.message),
    }


@app.post("/schemes/eligibility", tags=["Civic Services"])
def scheme_eligibility(request: EligibilityRequest):
    return {"eligible": check_eligibility(request.scheme, request.profile)}


@app.post("/chat", tags=["Companion"])
def chat(request: ChatRequest):
    if not request.message or not request.message.strip():
        raise HTTPException(status_code=400, detail="Message is required")

    session_id = request.session_id or uuid.uuid4().hex

    try:
        companion = get_companion(session_id)
    except ConfigurationError as e:
        audit_logger.error(f"CONFIG_ERROR: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    try:
        result = companion.send_message(request.message)
    except Exception as e:
        emit_exception_telemetry(e)
        audit_logger.error(f"ENGINE_ERROR: {type(e).__name__}")
        raise HTTPException(status_code=500, detail="Failed to process message")

    if not result.ok:
        status = 500 if result.kind == "configuration" else 503
        raise HTTPException(status_code=status, detail={"kind": result.kind, "message": result.message})

    return {
        "response": result.text,
        "model": result.model,
        "provider": result.provider,
        "session_id": session_id,
    }


@app.get("/health", tags=["System"])
def health():
    return {
        "status": "online",
        "modules": ["ScamShield", "ComplaintRouting", "DocumentGuidance", "Companion", "AuditLog"]
    }
