"""Test job posting endpoints."""
from datetime import datetime

from bson import ObjectId


NEW_JOB = {
    "title": "Graduate Engineer Trainee",
    "company": "Acme Corp",
    "location": "Bengaluru",
    "isWFH": False,
    "tags": ["python", "sql"],
    "applyUrl": "https://acme.example/apply",
    "type": "internship",
    "qualification": "B.E/B.Tech",
    "batch": "2024, 2025",
}


def test_create_job(client, job_service):
    response = client.post("/api/jobs", json=NEW_JOB)
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Graduate Engineer Trainee"
    assert data["type"] == "internship"
    assert data["isWFH"] is False
    assert data["tags"] == ["python", "sql"]
    assert data["postedAt"]
    assert ObjectId.is_valid(data["_id"])

    stored = job_service.collection.find_one({"_id": ObjectId(data["_id"])})
    assert stored["applyUrl"] == "https://acme.example/apply"
    assert isinstance(stored["postedAt"], datetime)


def test_create_job_defaults_type(client):
    response = client.post("/api/jobs", json={"title": "SDE 1", "company": "Initech"})
    assert response.status_code == 200
    assert response.json()["type"] == "job"


def test_create_job_requires_title_and_company(client):
    response = client.post("/api/jobs", json={"title": "No company"})
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Invalid request"
    assert "company" in body["details"]


def test_list_jobs_newest_first(client, job_service):
    job_service.insert({"title": "Old", "company": "A", "postedAt": datetime(2024, 1, 1)})
    job_service.insert({"title": "New", "company": "B", "postedAt": datetime(2024, 3, 1)})
    job_service.insert({"title": "Middle", "company": "C", "postedAt": datetime(2024, 2, 1)})

    response = client.get("/api/jobs")
    assert response.status_code == 200
    assert [job["title"] for job in response.json()] == ["New", "Middle", "Old"]


def test_get_job(client, job_service):
    job = job_service.insert({"title": "Analyst", "company": "Globex"})
    response = client.get(f"/api/jobs/{job['_id']}")
    assert response.status_code == 200
    assert response.json()["company"] == "Globex"


def test_get_job_not_found(client):
    response = client.get(f"/api/jobs/{ObjectId()}")
    assert response.status_code == 404
    assert response.json() == {"error": "Job not found"}


def test_get_job_malformed_id(client):
    response = client.get("/api/jobs/not-an-id")
    assert response.status_code == 404
    assert response.json() == {"error": "Job not found"}


def test_update_job_partial(client, job_service):
    job = job_service.insert({"title": "Intern", "company": "Hooli", "salary": "10k"})
    response = client.put(f"/api/jobs/{job['_id']}", json={"salary": "15k", "isWFH": True})
    assert response.status_code == 200
    data = response.json()
    assert data["salary"] == "15k"
    assert data["isWFH"] is True
    assert data["title"] == "Intern"


def test_update_job_not_found(client):
    response = client.put(f"/api/jobs/{ObjectId()}", json={"salary": "1"})
    assert response.status_code == 404


def test_delete_job(client, job_service):
    job = job_service.insert({"title": "Temp", "company": "Vandelay"})
    response = client.delete(f"/api/jobs/{job['_id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Job deleted"}
    assert job_service.collection.count_documents({}) == 0

    again = client.delete(f"/api/jobs/{job['_id']}")
    assert again.status_code == 404
