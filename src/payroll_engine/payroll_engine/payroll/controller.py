from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_month_key
from ..common.http import error_response, json_body, to_jsonable
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll/<month>", methods=["GET"], endpoint="payroll_sheet")
    def payroll_sheet(month: str):
        try:
            parse_month_key(month)
            sheet = container.payroll_service.build_month(month)
        except DomainError as e:
            return error_response(e)
        return jsonify(to_jsonable(sheet))

    @app.route(
        "/api/payroll/<month>/<employee_id>/loan-deduction",
        methods=["PUT"],
        endpoint="set_loan_deduction",
    )
    def set_loan_deduction(month: str, employee_id: str):
        try:
            parse_month_key(month)
            row = container.payroll_service.set_loan_deduction(
                employee_id=employee_id,
                month=month,
                amount=json_body().get("amount"),
            )
        except DomainError as e:
            return error_response(e)
        return jsonify(to_jsonable(row))

    @app.route("/api/payroll/<month>/<employee_id>/credit", methods=["POST"], endpoint="credit_payroll")
    def credit_payroll(month: str, employee_id: str):
        try:
            parse_month_key(month)
            row = container.payroll_service.credit(employee_id=employee_id, month=month)
        except DomainError as e:
            return error_response(e)
        return jsonify(to_jsonable(row))
