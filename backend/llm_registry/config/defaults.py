"""Built-in providers and models seeded on first startup."""

BUILTIN_PROVIDERS = [
    {
        "provider": "openai",
        "provider_name": "Open AI",
        "api_style": "openai",
        "logo": "/images/providers/openai.svg",
        "models": [
            {"name": "gpt-4o", "display_name": "GPT 4o", "max_tokens": 128000, "support_vision": True},
            {"name": "gpt-4o-mini", "display_name": "GPT 4o mini", "max_tokens": 128000, "support_vision": True},
            {"name": "o3-mini", "display_name": "o3 mini", "max_tokens": 200000, "support_vision": False},
        ],
    },
    {
        "provider": "claude",
        "provider_name": "Claude",
        "api_style": "claude",
        "logo": "/images/providers/claude.svg",
        "models": [
            {"name": "claude-3-5-sonnet-latest", "display_name": "Claude 3.5 Sonnet", "max_tokens": 200000, "support_vision": True},
            {"name": "claude-3-5-haiku-latest", "display_name": "Claude 3.5 Haiku", "max_tokens": 200000, "support_vision": False},
        ],
    },
    {
        "provider": "gemini",
        "provider_name": "Gemini",
        "api_style": "gemini",
        "logo": "/images/providers/gemini.svg",
        "models": [
            {"name": "gemini-1.5-pro", "display_name": "Gemini 1.5 Pro", "max_tokens": 2097152, "support_vision": True},
            {"name": "gemini-1.5-flash", "display_name": "Gemini 1.5 Flash", "max_tokens": 1048576, "support_vision": True},
        ],
    },
    {
        "provider": "deepseek",
        "provider_name": "Deepseek",
        "api_style": "openai",
        "logo": "/images/providers/deepseek.svg",
        "models": [
            {"name": "deepseek-chat", "display_name": "Deepseek V3", "max_tokens": 64000, "support_vision": False},
            {"name": "deepseek-reasoner", "display_name": "Deepseek R1", "max_tokens": 64000, "support_vision": False},
        ],
    },
]

DEFAULT_PROVIDER_NAME = "Untitled"
DEFAULT_API_STYLE = "openai"
