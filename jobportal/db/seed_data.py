"""
Seed data for the document store.

- MOCK_COMPANIES: fixed company directory
- MOCK_JOBS: hand-written featured listings
- generate_job_dataset(): pads MOCK_JOBS with generated listings
"""

import copy
import random
from typing import List, Optional


def _logo(seed: str, size: int = 100) -> str:
    return f"https://picsum.photos/seed/{seed}/{size}/{size}"


def _company(id, name, seed, rating, reviews, industry, active_jobs, description):
    return {
        "id": id, "name": name, "logo": _logo(seed), "rating": rating, "reviews": reviews,
        "industry": industry, "active_jobs": active_jobs, "description": description,
    }


MOCK_COMPANIES = [
    _company("1", "Google", "google", "4.5", "12k+", "Internet", 450, "Global leader in search and cloud technology."),
    _company("2", "Amazon", "amazon", "4.2", "25k+", "E-commerce", 820, "Worlds largest online retailer and cloud service provider."),
    _company("3", "Microsoft", "msft", "4.4", "18k+", "Software", 310, "Leading technology company in operating systems and productivity software."),
    _company("4", "Meta", "meta", "4.1", "9k+", "Social Media", 120, "Building the future of social connection and the metaverse."),
    _company("5", "Netflix", "netflix", "4.6", "5k+", "Entertainment", 65, "Streaming entertainment service with millions of paid memberships."),
    _company("6", "Flipkart", "flipkart", "4.2", "15k+", "E-commerce", 340, "Indias leading e-commerce marketplace."),
    _company("7", "TCS", "tcs", "3.8", "100k+", "IT Services", 1200, "Global leader in IT services, digital and business solutions."),
    _company("8", "Infosys", "infosys", "3.9", "85k+", "IT Services", 950, "A global leader in next-generation digital services and consulting."),
    _company("9", "Zomato", "zomato", "3.9", "7k+", "Food Delivery", 180, "Better food for more people."),
    _company("10", "Swiggy", "swiggy", "4.2", "8k+", "Food Delivery", 210, "Order from your favorite restaurants & get it delivered."),
    _company("11", "Reliance Jio", "jio", "4.0", "30k+", "Telecom", 560, "Digitizing India with high-speed 4G/5G data services."),
    _company("12", "HDFC Bank", "hdfc", "4.1", "40k+", "Banking", 780, "Indias leading private sector bank."),
    _company("13", "Razorpay", "razorpay", "4.4", "2k+", "FinTech", 145, "The new standard for online payments."),
    _company("14", "BYJUS", "byjus", "3.5", "10k+", "EdTech", 320, "The worlds most valuable EdTech company."),
    _company("15", "PhonePe", "phonepe", "4.3", "5k+", "FinTech", 190, "Indias leading UPI and payments app."),
    _company("16", "Uber", "uber", "4.0", "15k+", "Transportation", 240, "Redefining the way the world moves."),
    _company("17", "HCLTech", "hcl", "3.7", "45k+", "IT Services", 670, "Global technology company that helps enterprises reimagine business."),
    _company("18", "Paytm", "paytm", "3.6", "12k+", "FinTech", 280, "Indias largest payments and financial services company."),
    _company("19", "Freshworks", "fresh", "4.3", "1k+", "SaaS", 90, "Fresh software for better customer engagement."),
    _company("20", "Zoho", "zoho", "4.5", "3k+", "SaaS", 150, "Operating system for business."),
    _company("21", "Wipro", "wipro", "3.8", "60k+", "IT Services", 840, "Ambition is the fuel for success."),
    _company("22", "Airtel", "airtel", "3.9", "20k+", "Telecom", 410, "Connecting millions through mobile and broadband."),
    _company("23", "ICICI Bank", "icici", "4.0", "35k+", "Banking", 620, "Hum Hai Na - Trusted banking partner."),
    _company("24", "Ola", "ola", "3.4", "18k+", "Mobility", 130, "Moving the world to sustainable mobility."),
]

TOP_COMPANIES = MOCK_COMPANIES[:5]


def _job(id, title, company, seed, location, min_salary, max_salary, experience,
         description, skills, work_mode, posted_at, applicants_count):
    return {
        "id": id,
        "title": title,
        "company": company,
        "logo": _logo(seed),
        "location": location,
        "salary": format_salary(min_salary, max_salary),
        "min_salary": min_salary,
        "max_salary": max_salary,
        "experience": experience,
        "description": description,
        "skills": skills,
        "work_mode": work_mode,
        "posted_at": posted_at,
        "type": "Full-time",
        "applicants_count": applicants_count,
    }


def format_salary(min_salary: float, max_salary: float) -> str:
    """Display string for a salary range in lakhs per annum."""
    return f"₹{min_salary:g}L - ₹{max_salary:g}L PA"


MOCK_JOBS = [
    # Google
    _job("g-1", "Senior Frontend Engineer", "Google", "google", "Bangalore, India", 35, 60, "5-10 Yrs",
         "Build scalable UIs for Google Cloud using React and TypeScript.",
         ["React", "TypeScript", "Google Cloud", "Jest", "Tailwind CSS", "Redux"], "Hybrid", "2 days ago", 342),
    _job("g-2", "Product Manager, AI", "Google", "google", "Hyderabad, India", 40, 75, "6-12 Yrs",
         "Lead the vision for next-gen AI search features.",
         ["Product Strategy", "ML", "Analytics", "Agile", "Roadmapping"], "On-site", "1 day ago", 89),
    # Amazon
    _job("a-1", "Software Development Engineer II", "Amazon", "amazon", "Bangalore, India", 28, 50, "3-7 Yrs",
         "Work on highly distributed systems for Amazon Retail.",
         ["Java", "AWS", "Microservices", "Distributed Systems", "DynamoDB"], "On-site", "Just now", 412),
    _job("a-2", "Operations Manager", "Amazon", "amazon", "Gurgaon, India", 18, 32, "4-8 Yrs",
         "Optimize fulfillment center operations and logistics.",
         ["Logistics", "Six Sigma", "Team Management", "Supply Chain"], "On-site", "3 days ago", 156),
    # Microsoft
    _job("ms-1", "Cloud Solutions Architect", "Microsoft", "msft", "Hyderabad, India", 45, 85, "10-15 Yrs",
         "Design complex enterprise cloud architectures on Azure.",
         ["Azure", "Security", "Cloud Strategy", "DevOps", "ARM Templates"], "Hybrid", "1 week ago", 45),
    _job("ms-2", "Data Scientist II", "Microsoft", "msft", "Bangalore, India", 30, 55, "4-8 Yrs",
         "Apply ML techniques to improve Windows and Office telemetry.",
         ["Python", "Azure ML", "Statistics", "SQL", "PyTorch"], "Remote", "2 days ago", 234),
    # Meta
    _job("m-1", "Content Policy Manager", "Meta", "meta", "Gurgaon, India", 25, 45, "5-9 Yrs",
         "Shape the policies that govern content on FB and Instagram.",
         ["Policy", "Public Affairs", "Risk Management", "Stakeholder Management"], "Hybrid", "4 days ago", 67),
    # TCS
    _job("tcs-1", "Java Full Stack Developer", "TCS", "tcs", "Chennai, India", 6, 15, "2-5 Yrs",
         "Join our banking digital transformation team.",
         ["Java 17", "Spring Boot", "Angular", "Oracle", "JPA"], "On-site", "5 hours ago", 1200),
    _job("tcs-2", "Business Analyst", "TCS", "tcs", "Pune, India", 8, 18, "3-6 Yrs",
         "Gather requirements for global retail clients.",
         ["Agile", "Jira", "Business Communication", "UML", "User Stories"], "Hybrid", "Yesterday", 450),
    # Zomato
    _job("z-1", "Growth Marketing Lead", "Zomato", "zomato", "Gurgaon, India", 20, 38, "5-8 Yrs",
         "Drive user acquisition and retention through data-driven campaigns.",
         ["Digital Marketing", "SQL", "A/B Testing", "Retention", "Google Ads"], "On-site", "2 days ago", 178),
    _job("z-2", "SDE III, Backend", "Zomato", "zomato", "Gurgaon, India", 40, 65, "6-10 Yrs",
         "Design the core checkout and logistics engine.",
         ["Golang", "Redis", "Kafka", "System Design", "PostgreSQL"], "On-site", "Just now", 56),
]

GENERATED_TITLES = [
    "Frontend Developer", "Backend Engineer", "Full Stack Developer", "DevOps Engineer",
    "Data Scientist", "Product Manager", "UX Designer", "HR Generalist",
]
GENERATED_LOCATIONS = ["Bangalore", "Hyderabad", "Chennai", "Pune", "Remote"]


def generate_job_dataset(target_size: int = 1100, rng: Optional[random.Random] = None) -> List[dict]:
    """
    Build the seeded job collection.

    Starts from MOCK_JOBS and appends generated listings gen-1, gen-2, ...
    until target_size jobs exist. Pass a seeded random.Random for a
    reproducible dataset.
    """
    rng = rng or random.Random()
    jobs = copy.deepcopy(MOCK_JOBS)
    id_counter = 1

    while len(jobs) < target_size:
        company = rng.choice(MOCK_COMPANIES)
        title = rng.choice(GENERATED_TITLES)
        location = rng.choice(GENERATED_LOCATIONS)
        min_sal = rng.randint(5, 34)
        max_sal = min_sal + 15

        jobs.append({
            "id": f"gen-{id_counter}",
            "title": f"{'Senior ' if rng.random() > 0.8 else ''}{title}",
            "company": company["name"],
            "logo": company["logo"],
            "location": f"{location}, India",
            "salary": format_salary(min_sal, max_sal),
            "min_salary": min_sal,
            "max_salary": max_sal,
            "experience": f"{rng.randint(0, 9)} Yrs",
            "description": f"Join {company['name']} as a {title}. We are looking for passionate individuals.",
            "skills": ["React", "Node.js", "SQL"],
            "work_mode": "Hybrid" if rng.random() > 0.5 else "Remote",
            "posted_at": "3 days ago",
            "type": "Full-time",
            "applicants_count": rng.randint(0, 99),
        })
        id_counter += 1

    return jobs
