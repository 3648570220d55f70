"""Module A: Kinds of form submission handled by the pipeline."""
import enum


class SubmissionKind(str, enum.Enum):
    inquiry = "inquiry"
    listing = "listing"
    rating = "rating"
