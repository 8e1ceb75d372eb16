"""Tests for load_cbom, LoadedCbom, and CbomViewer."""

from __future__ import annotations

import copy
from typing import Any

from cbomlens.core.document import CbomViewer, CodeOrigin, load_cbom
from cbomlens.core.quantum import NOT_ANALYSED, default_quantum_security
from cbomlens.notifications import ErrorStatus, Notifier


class TestLoadCbom:

    def test_none_document_gives_empty_result(self) -> None:
        loaded = load_cbom(None)
        assert loaded.detections == []
        assert loaded.is_empty
        assert loaded.validation.is_valid is False
        assert loaded.quantum_security == default_quantum_security()
        assert len(loaded.dependency_index) == 0

    def test_document_without_components(self, minimal_cbom: dict[str, Any]) -> None:
        loaded = load_cbom(minimal_cbom)
        assert loaded.validation.is_valid is True
        assert loaded.detections == []

    def test_sample_views(self, sample_cbom: dict[str, Any]) -> None:
        loaded = load_cbom(sample_cbom)
        assert len(loaded.detections) == 6
        assert loaded.quantum_security.qtrl.level == 1
        view = loaded.dependencies("cert-api")
        assert [(a["bom-ref"], p) for a, p in view.depends_on] == [
            ("alg-rsa", "cryptoProperties.certificateProperties.signatureAlgorithmRef"),
        ]

    def test_document_not_modified(self, sample_cbom: dict[str, Any]) -> None:
        before = copy.deepcopy(sample_cbom)
        load_cbom(sample_cbom)
        assert sample_cbom == before

    def test_code_origin_from_metadata(self, sample_cbom: dict[str, Any]) -> None:
        origin = load_cbom(sample_cbom).code_origin
        assert origin.git_url == "https://github.com/example/payments"
        assert origin.revision == "main"
        assert origin.commit_id == "4be1f0c2d9a7e3b6"
        assert origin.subfolder == "services/api"

    def test_metadata_overrides_supplied_origin(self, sample_cbom: dict[str, Any]) -> None:
        supplied = CodeOrigin(revision="feature", uploaded_file_name="cbom.json")
        origin = load_cbom(sample_cbom, origin=supplied).code_origin
        assert origin.revision == "main"
        assert origin.uploaded_file_name == "cbom.json"

    def test_assessment_helper(self, sample_cbom: dict[str, Any]) -> None:
        loaded = load_cbom(sample_cbom)
        assert loaded.assessment(loaded.detections[0]).vector_name == "HNDL"
        assert loaded.assessment(loaded.detections[2]).vector == NOT_ANALYSED

    def test_documents_load_independently(
        self, sample_cbom: dict[str, Any], minimal_cbom: dict[str, Any]
    ) -> None:
        first = load_cbom(sample_cbom)
        second = load_cbom(minimal_cbom)
        assert len(first.detections) == 6
        assert second.detections == []
        assert first.dependencies("alg-aes").is_depended_on
        assert second.dependencies("alg-aes").is_empty


class TestCbomViewer:

    def test_show_publishes_new_handle(
        self, sample_cbom: dict[str, Any], minimal_cbom: dict[str, Any]
    ) -> None:
        viewer = CbomViewer()
        assert viewer.current is None
        first = viewer.show(sample_cbom)
        assert viewer.current is first
        second = viewer.show(minimal_cbom)
        assert viewer.current is second
        # The replaced handle keeps its own index.
        assert first.dependencies("alg-aes").is_depended_on
        assert second.dependencies("alg-aes").is_empty

    def test_show_from_upload(self, sample_cbom: dict[str, Any]) -> None:
        loaded = CbomViewer().show_from_upload(sample_cbom, "payments.cbom.json")
        assert loaded.code_origin.uploaded_file_name == "payments.cbom.json"

    def test_show_from_scan(self, sample_cbom: dict[str, Any]) -> None:
        scan = {
            "bom": sample_cbom,
            "projectIdentifier": "payments",
            "gitUrl": "https://github.com/example/payments-fork",
            "branch": "develop",
        }
        loaded = CbomViewer().show_from_scan(scan)
        assert len(loaded.detections) == 6
        assert loaded.code_origin.project_identifier == "payments"
        assert loaded.code_origin.git_url == "https://github.com/example/payments-fork"
        assert loaded.code_origin.revision == "develop"
        assert loaded.code_origin.commit_id == "4be1f0c2d9a7e3b6"

    def test_show_from_scan_without_bom(self) -> None:
        notifier = Notifier()
        viewer = CbomViewer(notifier)
        loaded = viewer.show_from_scan({"projectIdentifier": "empty"})
        assert loaded.detections == []
        assert loaded.validation.is_valid is False
        assert notifier.has(ErrorStatus.INVALID_CBOM)
        assert viewer.current is loaded

    def test_clear(self, minimal_cbom: dict[str, Any]) -> None:
        viewer = CbomViewer()
        viewer.show(minimal_cbom)
        viewer.clear()
        assert viewer.current is None
