"""Fixed reference data: demo accounts, universities, seed collections."""

DEMO_PASSWORD = "toms1902"

# username -> canned identity. First pair is the student, second the employer.
DEMO_ACCOUNTS = {
    "user1": {
        "mode": "student",
        "first_name": "Test",
        "last_name": "Student",
        "university": "Trinity College Dublin (TCD)",
    },
    "user2": {
        "mode": "employer",
        "first_name": "Global Ventures Ltd",
        "last_name": "Ventures",
        "company_name": "Global Ventures Ltd",
    },
}

MIN_PASSWORD_LENGTH = 6

UNIVERSITIES = sorted([
    "University College Dublin (UCD)",
    "Trinity College Dublin (TCD)",
    "Dublin City University (DCU)",
    "University College Cork (UCC)",
    "University of Galway",
    "University of Limerick (UL)",
    "Maynooth University (MU)",
    "Technological University Dublin (TU Dublin)",
    "Munster Technological University (MTU)",
    "Atlantic Technological University (ATU)",
    "South East Technological University (SETU)",
    "Technological University of the Shannon (TUS)",
    "National College of Ireland (NCI)",
    "Royal College of Surgeons in Ireland (RCSI)",
    "Mary Immaculate College (MIC)",
    "St. Angela's College",
    "Dublin Business School (DBS)",
    "Griffith College",
    "Dun Laoghaire Institute of Art, Design and Technology (IADT)",
    "National College of Art and Design (NCAD)",
])

# Fresh start: no pre-existing jobs or applications
SEED_JOBS: list = []
SEED_APPLICATIONS: list = []

# Seeded profile values used the first time a student opens their profile
DEFAULT_PROFILE = {
    "first_name": "Alex",
    "last_name": "Byrne",
    "dob": "2001-05-15",
    "phone": "+353 87 123 4567",
    "university": "Trinity College Dublin (TCD)",
    "degree": "BSc Computer Science",
    "bio": "Dedicated student looking for a part-time role to gain experience.",
    "skills": ["Communication", "Time Management"],
}
