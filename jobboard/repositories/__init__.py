from .companies import CompanyRepository
from .jobs import JobRepository

__all__ = ["CompanyRepository", "JobRepository"]
