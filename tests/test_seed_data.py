"""
Unit tests for jobportal/db/seed_data.py
"""

import random

from jobportal.db.seed_data import (
    GENERATED_LOCATIONS, GENERATED_TITLES, MOCK_COMPANIES, MOCK_JOBS, TOP_COMPANIES,
    format_salary, generate_job_dataset,
)


def test_company_directory():
    assert len(MOCK_COMPANIES) == 24
    assert [c["id"] for c in MOCK_COMPANIES] == [str(i) for i in range(1, 25)]
    assert [c["name"] for c in TOP_COMPANIES] == ["Google", "Amazon", "Microsoft", "Meta", "Netflix"]


def test_featured_jobs():
    assert [j["id"] for j in MOCK_JOBS] == [
        "g-1", "g-2", "a-1", "a-2", "ms-1", "ms-2", "m-1", "tcs-1", "tcs-2", "z-1", "z-2"
    ]
    tcs = MOCK_JOBS[7]
    assert tcs["salary"] == "₹6L - ₹15L PA"
    assert tcs["applicants_count"] == 1200


def test_format_salary_drops_trailing_zeroes():
    assert format_salary(10.0, 25.0) == "₹10L - ₹25L PA"
    assert format_salary(7.5, 12) == "₹7.5L - ₹12L PA"


def test_default_dataset_size():
    jobs = generate_job_dataset(rng=random.Random(1))
    assert len(jobs) == 1100
    assert jobs[:11] == MOCK_JOBS
    assert jobs[11]["id"] == "gen-1"
    assert jobs[-1]["id"] == "gen-1089"
    assert len({j["id"] for j in jobs}) == 1100


def test_generated_job_shape():
    jobs = generate_job_dataset(300, rng=random.Random(3))
    company_names = {c["name"] for c in MOCK_COMPANIES}

    for job in jobs[len(MOCK_JOBS):]:
        base_title = job["title"].replace("Senior ", "", 1)
        assert base_title in GENERATED_TITLES
        assert job["company"] in company_names
        city = job["location"].rsplit(", India", 1)[0]
        assert city in GENERATED_LOCATIONS
        assert 5 <= job["min_salary"] <= 34
        assert job["max_salary"] == job["min_salary"] + 15
        assert job["salary"] == f"₹{job['min_salary']}L - ₹{job['max_salary']}L PA"
        assert job["work_mode"] in ("Hybrid", "Remote")
        assert job["skills"] == ["React", "Node.js", "SQL"]
        assert 0 <= job["applicants_count"] <= 99
        assert job["description"] == (
            f"Join {job['company']} as a {base_title}. We are looking for passionate individuals."
        )


def test_seeded_generation_is_reproducible():
    first = generate_job_dataset(100, rng=random.Random(9))
    second = generate_job_dataset(100, rng=random.Random(9))
    assert first == second


def test_target_smaller_than_featured_keeps_featured():
    assert len(generate_job_dataset(5)) == len(MOCK_JOBS)


def test_mock_jobs_are_not_mutated_by_generation():
    jobs = generate_job_dataset(20)
    jobs[0]["applicants_count"] += 1
    assert MOCK_JOBS[0]["applicants_count"] == 342
