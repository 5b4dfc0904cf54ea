"""
RAG (Retrieval-Augmented Generation) Pipeline

Grounds chat answers in the curated financial-literacy knowledge base by:
1. Seeding knowledge documents into the database
2. Ranking them against the user's question by keyword overlap
3. Handing the top documents to the prompt composer
"""

from finlit.services.rag.retriever import KnowledgeStore, rank, retrieve_relevant_documents

__all__ = [
    "KnowledgeStore",
    "rank",
    "retrieve_relevant_documents",
]
