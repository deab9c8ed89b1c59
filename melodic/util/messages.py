""" All Error and Success Message declare here... """


# SUCCESS MESSAGES
SUCCESS = {
    "MESSAGES_DELETE_SUCCESS"   :   "Chat history cleared.",
}


# ERROR MESSAGES
ERROR = {
    # Request Errors
    "INVALID_REQUEST"           :   "Request body is required.",
    "INVALID_REQUEST_DATA"      :   "Invalid request data.",

    # Chat Errors
    "MISSING_MESSAGE"           :   "Message is required.",
    "INVALID_MESSAGE"           :   "Message must be a non-empty string.",
    "MESSAGE_TOO_LONG"          :   "Message must not exceed {} characters.",
    "MISSING_API_KEY"           :   "API key is required.",
    "INVALID_MODEL"             :   "Model must be a non-empty string.",
    "INVALID_SESSION_ID"        :   "sessionId must be a non-empty string.",
    "INVALID_HISTORY"           :   "conversationHistory must be a list of {role, content} objects.",
    "INVALID_HISTORY_ROLE"      :   "conversationHistory roles must be 'user' or 'assistant'.",
    "INVALID_SYSTEM_PROMPT"     :   "systemPrompt must be a string.",

    # Message Store Errors
    "MISSING_SESSION_ID"        :   "sessionId is required.",
    "INVALID_ROLE"              :   "role must be 'user' or 'assistant'.",
    "MISSING_CONTENT"           :   "content is required.",
    "INVALID_USER_ID"           :   "userId must be an integer.",
    "INVALID_LIMIT"             :   "limit must be an integer between 1 and {}.",
    "USER_NOT_FOUND"            :   "User with given ID does not exist.",
    "MESSAGE_CREATE_FAILED"     :   "Unable to save message.",
    "MESSAGE_DELETE_FAILED"     :   "Unable to delete messages.",

    # User Errors
    "USERNAME_REQUIRED"         :   "Username is required.",
    "PASSWORD_REQUIRED"         :   "Password is required.",
    "USERNAME_TAKEN"            :   "Another user already exists with this username.",
    "USER_CREATE_FAILED"        :   "Unable to create user.",

    # Provider Errors
    "PROVIDER_KEY_MISSING"      :   "{provider} API key is not configured. Set {env_var} on the server.",
    "UPSTREAM_FAILED"           :   "{provider} API error: {status} {body}",
    "UPSTREAM_EMPTY_RESPONSE"   :   "{provider} returned no choices.",
    "UNSUPPORTED_PROVIDER"      :   "Unsupported provider '{provider}'. Allowed values: {allowed}.",

    # Storage Errors
    "UNSUPPORTED_DATABASE"      :   "Context storage does not support the '{dialect}' database. Supported: {allowed}.",
}
