"""Resume texts shared by the test modules."""

REFERENCE_YEAR = 2025

STRONG_RESUME = (
    "JANE DOE\n"
    "jane.doe@example.com | (555) 123-4567 | linkedin.com/in/janedoe\n"
    "\n"
    "Professional Summary\n"
    "Software engineer with 7 years of software development experience building REST API platforms, "
    "with deep programming, debugging and architecture skills.\n"
    "\n"
    "Work Experience\n"
    "Senior Software Engineer, Acme Cloud, 2020 - 2024\n"
    "- Architected a microservices platform in Python and Go serving 2M users with 99.9% uptime\n"
    "- Reduced API latency by 45% through database query optimization and Redis caching\n"
    "- Led code review and testing practices for a team of 8 engineers, cutting defects by 30%\n"
    "- Built CI/CD pipelines on AWS with Docker and Kubernetes, shipping 3x more releases per quarter\n"
    "- Designed REST and GraphQL services handling $4M in annual transactions\n"
    "- Implemented algorithms and data structures that reduced batch runtime by 60%\n"
    "\n"
    "Software Engineer, Beta Labs, 2017 - 2020\n"
    "- Developed object-oriented services in Java and TypeScript used by 500 customers\n"
    "- Improved debugging workflows with structured logging, reducing incident resolution time by 40%\n"
    "- Migrated version control from SVN to Git for 25 developers across 4 teams\n"
    "- Automated unit testing and integration testing with 85% coverage using TDD\n"
    "- Optimized PostgreSQL database schemas, saving $120K in yearly infrastructure cost\n"
    "\n"
    "Technical Skills\n"
    "Python, JavaScript, TypeScript, Java, Go, React, Node.js, Django, Flask, Docker, Kubernetes, "
    "AWS, GCP, PostgreSQL, MongoDB, Kafka, Terraform\n"
    "Coding standards, design patterns, scalability, performance optimization, agile, scrum\n"
    "\n"
    "Education\n"
    "B.S. Computer Science, State University\n"
)

WEAK_RESUME = (
    "John Smith\n"
    "Looking for a new opportunity in an office environment where I can grow.\n"
    "\n"
    "About Me\n"
    "I am a hard worker who likes to help people and learn new things every day at work.\n"
    "\n"
    "Work History\n"
    "Office Assistant, Local Company, 2021 - 2023\n"
    "- Responsible for answering phones and greeting visitors at the front desk\n"
    "- Helped with filing paperwork and organizing the supply closet\n"
    "- Responsible for scheduling meetings for the managers in the office\n"
    "- Helped with data entry and other tasks as needed by the team\n"
    "- Assisted with ordering office supplies when they ran low\n"
    "\n"
    "Education\n"
    "High School Diploma, Central High School\n"
)

# Software Engineer resume missing exactly three must-have keywords
# (code review, version control, design patterns) with two weak-verb bullets.
MIXED_RESUME = (
    "ALEX KIM\n"
    "alex.kim@example.com | 555-987-6543 | github.com/alexkim\n"
    "\n"
    "Summary\n"
    "Software engineer focused on software development, programming and coding of REST API services "
    "with strong debugging and architecture skills.\n"
    "\n"
    "Experience\n"
    "Software Engineer, Gamma Systems, 2019 - 2023\n"
    "- Built database migration tooling in Python that simplified deployments\n"
    "- Implemented algorithms and data structures for a search service used by 10K users\n"
    "- Responsible for testing object-oriented modules written in Java\n"
    "- Helped with Git branching and release tagging for the mobile team\n"
    "- Developed Docker images and AWS infrastructure for 12 services\n"
    "- Reduced cloud spend through autoscaling and rightsizing\n"
    "\n"
    "Skills\n"
    "Python, Java, Docker, AWS, React, agile\n"
    "\n"
    "Education\n"
    "B.S. Computer Science, Tech University\n"
)

# Short, unquantified bullets.
PLAIN_RESUME = (
    "Sam Lee\n"
    "sam.lee@example.com\n"
    "\n"
    "Summary\n"
    "Operations coordinator with experience supporting busy teams in retail and logistics environments, "
    "known for reliable follow-through, clear written updates and calm handling of daily scheduling "
    "problems across several store locations.\n"
    "\n"
    "Experience\n"
    "Operations Coordinator, Northwind Retail, 2018 - 2022\n"
    "- Managed weekly staff schedules\n"
    "- Coordinated vendor deliveries\n"
    "- Maintained inventory records\n"
    "- Handled customer complaints\n"
    "- Updated store procedures\n"
    "\n"
    "Education\n"
    "B.A. Business Administration\n"
)

PLAIN_RESUME_WITH_METRIC = PLAIN_RESUME.replace(
    "- Updated store procedures\n",
    "- Updated store procedures\n- Increased revenue by 45%\n",
)

UNKNOWN_ROLE = "Underwater Basket Weaving Specialist"
