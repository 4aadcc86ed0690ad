"""
Prompt templates for the AI assistant.

Templates use ``str.format`` placeholders.
"""

TEMPLATED_CHAT = """You are a helpful assistant.
{context}

User's question: {topic}

Please provide a detailed and helpful response."""

SUMMARIZE = """Please summarize the following text concisely:

{text}

Summary:"""

TRANSLATE = """Translate the following text to {target_language}:

{text}

Translation:"""

EXPLAIN_CODE = """You are an expert programmer. Please explain the following {language} code:

```{language}
{code}
```

Please provide:
1. What this code does
2. Key concepts used
3. Any potential improvements

Explanation:"""

NO_CONTEXT = "No additional context provided."
