from typing import List, Optional

from pydantic import BaseModel, Field


class PostFrontmatter(BaseModel):
    title: str = ""
    description: str = ""
    date: str = ""
    slug: str = ""


class Post(BaseModel):
    frontmatter: PostFrontmatter = Field(default_factory=PostFrontmatter)
    content: str


class PreviewPost(BaseModel):
    title: str = ""
    description: str = ""
    date: str = ""
    slug: str = ""

    @classmethod
    def from_post(cls, post: Post) -> "PreviewPost":
        return cls(**post.frontmatter.model_dump())


class TreeItem(BaseModel):
    path: str
    type: str
    sha: Optional[str] = None
    url: Optional[str] = None


class TreeResponse(BaseModel):
    sha: Optional[str] = None
    tree: List[TreeItem] = Field(default_factory=list)
