"""
Prompt Composer Service

Turns retrieved documents and user input into a single prompt for the
language model. Two modes:
- grounding: answer a free-form question using the retrieved documents
- generation: produce N multiple-choice quiz items as a JSON array

Both are pure functions of their inputs.
"""

from finlit.services.rag.models import RankedDocument


def format_reference_lines(documents: list[RankedDocument]) -> str:
    """Render each document as a '- <title>: <body>' line."""
    return "\n\n".join(f"- {doc.title}: {doc.body}" for doc in documents)


def compose_grounding_prompt(question: str, documents: list[RankedDocument]) -> str:
    """
    Compose the prompt for a chat question.

    Args:
        question: The user's question, embedded verbatim
        documents: Ranked knowledge documents (may be empty)

    Returns:
        Prompt string for the generative client
    """
    references = format_reference_lines(documents)

    prompt = f"""You are a helpful AI assistant for digital financial literacy. Use the following trusted information to answer the user's question:

{references}

User Question: {question}

Please provide a clear, helpful answer based on the information above. If the information doesn't cover the specific question, provide general best practices for digital financial safety. Keep your response concise and educational."""

    return prompt.strip()


def compose_generation_prompt(category: str, count: int) -> str:
    """
    Compose the prompt for generating quiz items.

    Args:
        category: Quiz topic, e.g. "UPI Safety"
        count: Exact number of questions to request

    Returns:
        Prompt string for the generative client
    """
    prompt = f"""Generate exactly {count} multiple choice questions about {category} for a digital financial literacy quiz.

Requirements:
- Each question must have exactly 4 options
- Exactly one option must be correct
- Questions should be practical and relevant to daily financial activities
- Include questions about safety, best practices, and common scenarios
- Make questions suitable for beginners to intermediate level
- Focus on real-world applications and common mistakes people make

Output Format:
Respond with a JSON array of {count} objects. Each object must contain:
- "question": The question text
- "options": Array of exactly 4 answer strings
- "correctAnswer": Index (0-3) of the correct option
- "explanation": Brief explanation of why the answer is correct

Example element:
{{"question": "Specific question about {category}?", "options": ["Option A", "Option B", "Option C", "Option D"], "correctAnswer": 0, "explanation": "Why this is correct"}}

Return only the JSON array. Do not write any text before or after it."""

    return prompt.strip()
