import shutil
from janai.decision.classifier import RiskScoringClassifier
from janai.routing.departments import route_department
from janai.routing.intent import detect_intent

# --- TERMINAL THEME ---
class Colors:
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'

    HEADER = '\033[1m'
    MUTED = '\033[90m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'

    BORDER = MUTED
    LABEL = ENDC
    VALUE = BOLD

TIER_COLORS = {
    "low": Colors.OKGREEN,
    "medium": Colors.WARNING,
    "high": Colors.FAIL,
    "critical": Colors.FAIL + Colors.BOLD,
}

SAMPLE_SMS = [
    "URGENT: Your Aadhaar will be blocked! Click here: bit.ly/abc123",
    "Your order has been shipped and will arrive Monday.",
    "CALL NOW 1800123456 to claim your lottery prize",
    "This is an urgent reminder about the community meeting next week.",
]

SAMPLE_CALLERS = [
    "9876543210 says my PAN card will be blocked today",
    "Postman asking for the house number",
]

SAMPLE_COMPLAINTS = ["Streetlight broken", "Garbage not collected", "Noise from construction"]


def print_separator(char="-"):
    width = shutil.get_terminal_size().columns
    print(Colors.BORDER + (char * width) + Colors.ENDC)

def print_section(title):
    print("\n")
    print_separator("=")
    print(f"  {Colors.HEADER}{title.upper()}{Colors.ENDC}")
    print_separator("=")

def print_kv(key, value, color=Colors.VALUE):
    print(f"{Colors.LABEL}{key:<25}{Colors.ENDC} : {color}{value}{Colors.ENDC}")

def print_outcome(label, outcome):
    tier = outcome.risk_tier.value
    print_kv(label, f"{tier.upper()} ({outcome.confidence_percent:.0f}%)", TIER_COLORS[tier])
    for indicator in outcome.indicators:
        print(f"   ├─ {indicator}")
    print(f"   └─ {outcome.recommendation}")


def run_demo():
    classifier = RiskScoringClassifier()

    print_section("Step 1: SMS Scan")
    for text in SAMPLE_SMS:
        print_outcome(text[:25], classifier.classify(text))

    print_section("Step 2: Caller Check")
    for caller in SAMPLE_CALLERS:
        print_outcome(caller[:25], classifier.check_caller(caller))

    print_section("Step 3: Complaint Routing")
    for complaint in SAMPLE_COMPLAINTS:
        print_kv(complaint, route_department(complaint))

    print_section("Step 4: Intent Detection")
    intent = detect_intent("What is the status of my pension application?")
    print_kv("Intent", intent.type)
    print_kv("Service", intent.service)

    print_separator("=")
    print("\n")

if __name__ == "__main__":
    run_demo()
