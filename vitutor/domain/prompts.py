"""
Prompt templates for every learning task.

Explanations shown to the learner are always requested in Vietnamese,
whatever the language of the input.
"""

# ==========================================
# Primary task prompts
# ==========================================

TRANSLATE_PROMPT = """Translate the following Vietnamese sentence into English and provide three different translations that fit different contexts.
Your response must be a JSON array that adheres to the provided schema.

- For the `explanation` field, you must provide the explanation in **Vietnamese**.

Vietnamese: "{text}"
"""

GRAMMAR_PROMPT = """Please act as an expert English grammar checker. Analyze the following English sentence, identify all grammatical and spelling errors, and provide the corrected version along with clear explanations and alternative phrasings.

Your response must be a JSON object that adheres to the provided schema.

- For the `explanation` field in the `explanations` array, you must provide the explanation in **Vietnamese**.
- For the `alternatives` array, provide three distinct options.

Original Sentence: "{text}"
"""

WORD_MEANING_PROMPT = """Analyze the following English word and provide a detailed breakdown.
Your response must be a JSON object that adheres to the provided schema.

- For the `definition` field, you must provide the definition in **Vietnamese**.
- For the `exampleSentences` array, provide at least two examples, each with its Vietnamese translation.

Word: "{text}"
"""

# ==========================================
# Follow-up chat
# ==========================================

CHAT_CONTEXT_PROMPT = """You are an AI assistant. The user is asking follow-up questions about a specific context. Here is the context:

{context_prompt}

Now, answer the user's questions. Be helpful and concise."""

CHAT_ACKNOWLEDGEMENT = "Okay, I understand the context. How can I help you further?"

# ==========================================
# Task context snapshots
# ==========================================
# The primary result a follow-up conversation is grounded on.

TRANSLATE_CONTEXT_TEMPLATE = (
    'Original Vietnamese Text: "{text}"\n\nAI Translation and Analysis:\n{result_json}'
)

GRAMMAR_CONTEXT_TEMPLATE = (
    'Original English Sentence: "{text}"\n\n'
    "AI Grammar Correction and Analysis:\n{result_json}"
)

WORD_MEANING_CONTEXT_TEMPLATE = (
    'Original English Word: "{text}"\n\nAI Definition and Analysis:\n{result_json}'
)
