""" All Application Constants declare here... """

# Python Packages
from decouple import config


# App Constants
APP_ENV                         =   config('APP_ENV', default = 'development')
APP_SECRET_KEY                  =   config('APP_SECRET_KEY', default = 'melodic-dev-secret')
LOG_LEVEL                       =   config('LOG_LEVEL', default = 'INFO')


# Swagger Constants
SWAGGER_APP_PROPS       =   {
                                "name": "Melodic",
                                "version": "1.0",
                                "description": "Melodic chat assistant: remembers who \
                                you are across a session, keeps chat history, and \
                                answers web-search questions with citations."
                            }


# Database Constants
# DATABASE_URL wins when set (tests use "sqlite://"), otherwise a PostgreSQL
# URI is built from the DB_* values.
DATABASE_URL                    =   config('DATABASE_URL', default = '')
DB_HOST                         =   config('DB_HOST', default = 'localhost')
DB_PORT                         =   config('DB_PORT', default = '5432')
DB_NAME                         =   config('DB_NAME', default = 'melodic')
DB_USER                         =   config('DB_USER', default = 'postgres')
DB_PASSWORD                     =   config('DB_PASSWORD', default = '')


# Provider Selection
CHAT_PROVIDER                   =   config('CHAT_PROVIDER', default = 'openai')
SEARCH_PROVIDER                 =   config('SEARCH_PROVIDER', default = 'perplexity')

# "use_env" in the apiKey field means: use the server-held key.
# Any other value is a legacy client-supplied key, honoured only when allowed.
USE_ENV_API_KEY                 =   "use_env"
ALLOW_CLIENT_API_KEYS           =   config('ALLOW_CLIENT_API_KEYS', default = False, cast = bool)


# OpenAI Constants
OPENAI_API_KEY		            =	config('OPENAI_API_KEY', default = '')
OPENAI_DEFAULT_MODEL            =   "gpt-4o"
OPENAI_MAX_TOKENS		        =	500


# OpenRouter Constants
OPENROUTER_API_KEY              =   config('OPENROUTER_API_KEY', default = '')
OPENROUTER_BASE_URL             =   "https://openrouter.ai/api/v1"
OPENROUTER_DEFAULT_MODEL        =   "openai/gpt-4o"
OPENROUTER_MAX_TOKENS           =   1000
OPENROUTER_SEARCH_MODEL         =   "openai/gpt-4o-mini-search-preview"
OPENROUTER_SEARCH_TEMPERATURE   =   0.2
OPENROUTER_SEARCH_MAX_TOKENS    =   1000
OPENROUTER_REFERER              =   config('OPENROUTER_REFERER', default = 'https://melodic.replit.app')
OPENROUTER_TITLE                =   config('OPENROUTER_TITLE', default = 'Melodic AI Assistant')


# Perplexity Constants
PERPLEXITY_API_KEY              =   config('PERPLEXITY_API_KEY', default = '')
PERPLEXITY_BASE_URL             =   "https://api.perplexity.ai"
PERPLEXITY_SEARCH_MODEL         =   "llama-3.1-sonar-small-128k-online"
PERPLEXITY_SEARCH_TEMPERATURE   =   0.2
PERPLEXITY_SEARCH_TOP_P         =   0.9
PERPLEXITY_SEARCH_MAX_TOKENS    =   500
PERPLEXITY_RECENCY_FILTER       =   "month"


# Anthropic Constants
ANTHROPIC_API_KEY               =   config('ANTHROPIC_API_KEY', default = '')
ANTHROPIC_DEFAULT_MODEL         =   "claude-3-5-sonnet-latest"
ANTHROPIC_MAX_TOKENS            =   1000
