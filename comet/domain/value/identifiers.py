"""Strongly typed identifiers for comment domain entities.

Identifiers are integers generated by the store. A comment's parent_id of 0
marks a root comment.
"""

from typing import NewType

AreaId = NewType("AreaId", int)
CommentId = NewType("CommentId", int)
ReportId = NewType("ReportId", int)

ROOT_PARENT_ID = CommentId(0)

# Identifiers are stored in 32-bit integer columns
MAX_ID = 2**31 - 1
