"""Default settings; any key can be overridden with a SIP_-prefixed environment variable."""


class DefaultConfig:
    CORS_ORIGINS = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    LOG_LEVEL = "INFO"

    DEFAULT_PAGE_SIZE = 12
    MAX_PAGE_SIZE = 120

    # slider bounds and starting values of the calculator form
    FORM_LIMITS = {
        "monthlyInvestment": {"min": 500, "max": 200000, "step": 500, "default": 5000},
        "years": {"min": 1, "max": 30, "step": 1, "default": 10},
        "expectedReturnRate": {"min": 1, "max": 30, "step": 0.1, "default": 12},
    }
