"""
Retrieval data types.

Snapshots of knowledge rows, detached from the database session so the
ranker and prompt composer stay pure.
"""

from pydantic import BaseModel, ConfigDict


class KnowledgeDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    body: str
    category: str
    tags: tuple[str, ...] = ()


class RankedDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    document: KnowledgeDocument
    score: int  # number of query keywords found in title + body

    @property
    def title(self) -> str:
        return self.document.title

    @property
    def body(self) -> str:
        return self.document.body
