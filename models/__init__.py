from .database import db
from .recruiter_request import RecruiterRequest
from .candidate_profile import CandidateProfile

__all__ = ['db', 'RecruiterRequest', 'CandidateProfile']
