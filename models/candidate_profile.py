from utils.helpers import isoformat, parse_isoformat
from .database import db


class CandidateProfile(db.Model):
    """Profile links a candidate submitted for a recruiter request."""
    id = db.Column(db.Integer, primary_key=True)
    request_id = db.Column(db.String(32), db.ForeignKey('recruiter_request.id'),
                           nullable=False, unique=True)

    full_name = db.Column(db.String(200))
    github_username = db.Column(db.String(100))
    linkedin_url = db.Column(db.String(500))
    stackoverflow_url = db.Column(db.String(500))
    portfolio_url = db.Column(db.String(500))
    additional_profiles = db.Column(db.JSON, nullable=False, default=list)
    additional_info = db.Column(db.Text)

    submitted_at = db.Column(db.DateTime, nullable=False)

    def to_dict(self):
        return {
            'fullName': self.full_name,
            'githubUsername': self.github_username,
            'linkedinUrl': self.linkedin_url,
            'stackoverflowUrl': self.stackoverflow_url,
            'portfolioUrl': self.portfolio_url,
            'additionalProfiles': list(self.additional_profiles or []),
            'additionalInfo': self.additional_info,
            'submittedAt': isoformat(self.submitted_at),
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            full_name=data.get('fullName'),
            github_username=data.get('githubUsername'),
            linkedin_url=data.get('linkedinUrl'),
            stackoverflow_url=data.get('stackoverflowUrl'),
            portfolio_url=data.get('portfolioUrl'),
            additional_profiles=list(data.get('additionalProfiles') or []),
            additional_info=data.get('additionalInfo'),
            submitted_at=parse_isoformat(data['submittedAt']),
        )
