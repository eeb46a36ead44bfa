"""
Schemas module - domain records and Request/Response schemas.

Domain records (User, JobListing, Message, StudentProfile) double as the
persisted shape; the rest is API contract (what client sends/receives).
"""
