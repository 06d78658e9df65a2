# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from invoicer.application.use_cases.invoices.create_invoice import CreateInvoiceUseCase
from invoicer.application.use_cases.invoices.delete_invoice import DeleteInvoiceUseCase
from invoicer.application.use_cases.invoices.get_invoice import GetInvoiceUseCase
from invoicer.application.use_cases.invoices.list_invoices import ListInvoicesUseCase
from invoicer.application.use_cases.invoices.update_invoice import UpdateInvoiceUseCase
from invoicer.interfaces.http.auth_gate import auth_required
from invoicer.interfaces.http.dto.invoices import (
    InvoiceCreateDTO,
    InvoiceDTO,
    InvoiceUpdateDTO,
    clean_invoice_payload,
)
from invoicer.shared.errors.validation import raise_validation_error


def _json_object() -> dict[str, Any]:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


class InvoicesController:
    def __init__(
        self,
        *,
        list_use_case: ListInvoicesUseCase,
        get_use_case: GetInvoiceUseCase,
        create_use_case: CreateInvoiceUseCase,
        update_use_case: UpdateInvoiceUseCase,
        delete_use_case: DeleteInvoiceUseCase,
    ) -> None:
        self._list_use_case = list_use_case
        self._get_use_case = get_use_case
        self._create_use_case = create_use_case
        self._update_use_case = update_use_case
        self._delete_use_case = delete_use_case

    def list(self) -> tuple[Response, int]:
        invoices = self._list_use_case.execute()
        return jsonify([InvoiceDTO.from_domain(invoice).to_json() for invoice in invoices]), 200

    def get(self, invoice_id: str) -> tuple[Response, int]:
        invoice = self._get_use_case.execute(invoice_id)
        return jsonify(InvoiceDTO.from_domain(invoice).to_json()), 200

    def create(self) -> tuple[Response, int]:
        try:
            dto = InvoiceCreateDTO.model_validate(clean_invoice_payload(_json_object()))
        except ValidationError as exc:
            raise_validation_error(exc)

        invoice = self._create_use_case.execute(dto.to_draft())
        return jsonify(InvoiceDTO.from_domain(invoice).to_json()), 200

    def update(self, invoice_id: str) -> tuple[Response, int]:
        try:
            dto = InvoiceUpdateDTO.model_validate(clean_invoice_payload(_json_object()))
        except ValidationError as exc:
            raise_validation_error(exc)

        invoice = self._update_use_case.execute(invoice_id, dto.to_changes())
        return jsonify(InvoiceDTO.from_domain(invoice).to_json()), 200

    def delete(self, invoice_id: str) -> tuple[Response, int]:
        self._delete_use_case.execute(invoice_id)
        return jsonify({"message": "invoice deleted successfully"}), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("invoices", __name__, url_prefix="/api/invoices")
        bp.add_url_rule("", view_func=auth_required(self.list), methods=["GET"])
        bp.add_url_rule("", view_func=auth_required(self.create), methods=["POST"])
        bp.add_url_rule(
            "/<invoice_id>", view_func=auth_required(self.get), methods=["GET"]
        )
        bp.add_url_rule(
            "/<invoice_id>", view_func=auth_required(self.update), methods=["PUT"]
        )
        bp.add_url_rule(
            "/<invoice_id>", view_func=auth_required(self.delete), methods=["DELETE"]
        )
        return bp
