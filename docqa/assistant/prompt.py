"""Prompt construction for document questions."""

from collections.abc import Sequence

from docqa.models.schemas import ScoredChunk

EMPTY_CONTEXT = "PDF content is being processed. Please ask general questions about the document."

PROMPT_TEMPLATE = """You are a helpful AI assistant helping users understand PDF documents.

Context from the uploaded PDF:
{context}

User Question: {question}

Please provide a helpful, informative response based on the PDF context above. \
If the question is about specific content in the PDF, use the context to answer it clearly. \
If it's a general question about the document, provide relevant insights based on what you can see.

Answer:"""


def format_context(selected: Sequence[ScoredChunk]) -> str:
    """Label each chunk with its page and 1-based chunk number."""
    return "\n\n".join(
        f"[Page {item.chunk.page}, Chunk {item.position + 1}]: {item.chunk.text}"
        for item in selected
    )


def build_prompt(selected: Sequence[ScoredChunk], question: str) -> str:
    """Assemble the completion prompt.

    Args:
        selected: Context chunks, best first.
        question: The user's question.

    Returns:
        Prompt text ending with an answer cue.
    """
    context = format_context(selected) or EMPTY_CONTEXT
    return PROMPT_TEMPLATE.format(context=context, question=question)
