"""Prompt templates for answer composition."""

FALLBACK_ANSWER = "I don't have enough information to answer this question."

ANSWER_PROMPT = """Answer the following question based only on the provided context. If you cannot find the answer in the context, say "I don't have enough information to answer this question."

Context: {context}
Question: {question}

Answer: """

# Phrases that mean the model declined to answer from the context
REFUSAL_MARKERS = (
    "i don't have enough information",
    "i do not have enough information",
)
