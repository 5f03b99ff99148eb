from datetime import timedelta
from utils.helpers import utcnow, isoformat, parse_isoformat
from .database import db
from .candidate_profile import CandidateProfile

# Fixed lifetime of a verification link
REQUEST_TTL = timedelta(days=7)

STATUS_PENDING = 'pending'
STATUS_COMPLETED = 'completed'
STATUS_EXPIRED = 'expired'


class RecruiterRequest(db.Model):
    """Database model for a recruiter's verification request to one candidate."""
    id = db.Column(db.String(32), primary_key=True)
    token = db.Column(db.String(64), unique=True, nullable=False, index=True)

    # Recruiter details
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    company = db.Column(db.String(200), nullable=False)
    job_title = db.Column(db.String(200), nullable=False)
    company_size = db.Column(db.String(50))

    # Candidate details
    candidate_name = db.Column(db.String(200), nullable=False)
    candidate_email = db.Column(db.String(255), nullable=False)
    position_title = db.Column(db.String(200), nullable=False)
    additional_notes = db.Column(db.Text)

    # Status tracking
    status = db.Column(db.String(20), default=STATUS_PENDING)  # pending, completed, expired
    created_at = db.Column(db.DateTime, nullable=False)
    expires_at = db.Column(db.DateTime, nullable=False)

    # Relationships
    candidate_profile = db.relationship('CandidateProfile', backref='recruiter_request',
                                        uselist=False, cascade='all, delete-orphan')

    @property
    def recruiter_name(self):
        return f"{self.first_name} {self.last_name}"

    @property
    def is_completed(self):
        return self.status == STATUS_COMPLETED and self.candidate_profile is not None

    def is_expired(self, now=None):
        return (now or utcnow()) > self.expires_at

    def to_dict(self):
        """Serialize for the JSON mirror file"""
        return {
            'id': self.id,
            'token': self.token,
            'firstName': self.first_name,
            'lastName': self.last_name,
            'email': self.email,
            'company': self.company,
            'jobTitle': self.job_title,
            'companySize': self.company_size,
            'candidateName': self.candidate_name,
            'candidateEmail': self.candidate_email,
            'positionTitle': self.position_title,
            'additionalNotes': self.additional_notes,
            'status': self.status,
            'createdAt': isoformat(self.created_at),
            'expiresAt': isoformat(self.expires_at),
            'candidateData': self.candidate_profile.to_dict() if self.candidate_profile else None,
        }

    @classmethod
    def from_dict(cls, data):
        record = cls(
            id=data['id'],
            token=data['token'],
            first_name=data['firstName'],
            last_name=data['lastName'],
            email=data['email'],
            company=data['company'],
            job_title=data['jobTitle'],
            company_size=data.get('companySize'),
            candidate_name=data['candidateName'],
            candidate_email=data['candidateEmail'],
            position_title=data['positionTitle'],
            additional_notes=data.get('additionalNotes'),
            status=data.get('status', STATUS_PENDING),
            created_at=parse_isoformat(data['createdAt']),
            expires_at=parse_isoformat(data['expiresAt']),
        )
        if data.get('candidateData'):
            record.candidate_profile = CandidateProfile.from_dict(data['candidateData'])
        return record
