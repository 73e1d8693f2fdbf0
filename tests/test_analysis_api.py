import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
TESTS_DIR = Path(__file__).resolve().parent
for _path in (PROJECT_ROOT, TESTS_DIR):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))

import dataclasses  # noqa: E402
import tempfile  # noqa: E402
from types import SimpleNamespace  # noqa: E402
from unittest.mock import AsyncMock, patch  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402

from app.ai.client import AITextClient  # noqa: E402
from app.analytics import records  # noqa: E402
from app.api.v1.ai import get_ai_client  # noqa: E402
from app.core import security  # noqa: E402
from app.main import app  # noqa: E402
from resume_samples import full_resume  # noqa: E402

JOB = {"title": "Platform Engineer", "company": "Globex", "description": "Python, Terraform and Redis experience."}


class AnalysisApiTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        patched = dataclasses.replace(
            records.settings,
            analysis_db_path=str(Path(self._tmp.name) / "records.db"),
            analysis_records_enabled=True,
        )
        self._records_patch = patch.object(records, "settings", patched)
        self._records_patch.start()
        self.client = TestClient(app)

    def tearDown(self):
        self._records_patch.stop()
        self._tmp.cleanup()

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")

    def test_ats_endpoint_returns_camel_case_score(self):
        response = self.client.post("/v1/analysis/ats", json={"resume": full_resume()})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["overall"], 100)
        self.assertEqual(body["sections"]["formatting"], 100)
        self.assertEqual(body["feedback"], ["Resume looks great! All key sections are present."])

    def test_ats_endpoint_accepts_empty_payload(self):
        response = self.client.post("/v1/analysis/ats", json={})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["overall"], 0)

    def test_jd_match_endpoint(self):
        response = self.client.post("/v1/analysis/jd-match", json={"resume": full_resume(), "jobDescription": JOB})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertIn("terraform", body["missing"])
        self.assertNotIn("python", body["missing"])
        self.assertEqual({"keyword", "found", "count"}, set(body["matches"][0]))

    def test_keywords_endpoint(self):
        response = self.client.post("/v1/analysis/keywords", json={"text": "Python and Docker on AWS"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["keywords"], ["python", "docker", "aws"])

    def test_report_endpoint_saves_record_when_asked(self):
        response = self.client.post(
            "/v1/analysis/report",
            json={"resume": full_resume(), "jobDescription": JOB, "lengthScore": 85, "save": True},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["lengthScore"], 85)
        self.assertIn("keywordMatch", body)
        self.assertIn("quantifiedMetrics", body)

        latest = self.client.get("/v1/records/latest")
        self.assertEqual(latest.status_code, 200)
        rows = latest.json()
        self.assertEqual(len(rows), 1)
        self.assertEqual(rows[0]["overallScore"], body["overall"])
        self.assertEqual(rows[0]["jobTitle"], "Platform Engineer")

    def test_report_without_save_does_not_persist(self):
        self.client.post("/v1/analysis/report", json={"resume": full_resume()})
        summary = self.client.get("/v1/records/summary").json()
        self.assertEqual(summary["total"], 0)

    def test_report_lines_endpoint(self):
        response = self.client.post("/v1/analysis/report/lines", json={"resume": full_resume(), "lengthScore": 85})
        self.assertEqual(response.status_code, 200)
        lines = response.json()["lines"]
        self.assertEqual(lines[0], "Resume Match Report")
        self.assertEqual(lines[5], "Length Score: 85%")

    def test_report_rejects_out_of_range_length(self):
        response = self.client.post("/v1/analysis/report", json={"resume": {}, "lengthScore": 150})
        self.assertEqual(response.status_code, 422)

    def test_add_skill_endpoint(self):
        response = self.client.post("/v1/analysis/add-skill", json={"resume": full_resume(), "skill": "Public Speaking"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["skills"]["soft"][-1], "Public Speaking")

    def test_records_require_api_key_when_configured(self):
        locked = dataclasses.replace(security.settings, api_key="secret")
        with patch.object(security, "settings", locked):
            self.assertEqual(self.client.get("/v1/records/summary").status_code, 401)
            response = self.client.get("/v1/records/summary", headers={"X-API-Key": "secret"})
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["enabled"])


class AIApiTests(unittest.TestCase):
    def setUp(self):
        self.create = AsyncMock()
        fake = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=self.create)))
        ai_client = AITextClient(model="test-model", client=fake)
        app.dependency_overrides[get_ai_client] = lambda: ai_client
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.pop(get_ai_client, None)

    def _reply(self, text: str) -> None:
        self.create.return_value = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=text))])

    def test_improve_text(self):
        self._reply("Led a team of 5 engineers.")
        response = self.client.post("/v1/ai/improve", json={"text": "was in charge of team"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"text": "Led a team of 5 engineers."})

    def test_bullets(self):
        self._reply('["Cut costs by 20%"]')
        response = self.client.post("/v1/ai/bullets", json={"position": "Engineer", "company": "Acme"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"bullets": ["Cut costs by 20%"]})

    def test_parse_returns_resume_document(self):
        self._reply('{"personalInfo": {"fullName": "Ada Park"}}')
        response = self.client.post("/v1/ai/parse", json={"text": "Ada Park, engineer"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["personalInfo"]["fullName"], "Ada Park")

    def test_provider_failure_maps_to_503(self):
        self._reply("not json")
        response = self.client.post("/v1/ai/parse", json={"text": "Ada Park, engineer"})
        self.assertEqual(response.status_code, 503)

    def test_blank_text_is_rejected(self):
        response = self.client.post("/v1/ai/improve", json={"text": ""})
        self.assertEqual(response.status_code, 422)


if __name__ == "__main__":
    unittest.main()
