from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..common.datetime_utils import require_period, week_range, year_month
from ..common.http import date_field
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.report_service

    def _today():
        return container.clock.now().date()

    @app.route("/api/reports/cash-flow", methods=["GET"], endpoint="report_cash_flow")
    def report_cash_flow():
        args = dict(request.args)
        start = date_field(args, "start", "Tanggal mulai")
        end = date_field(args, "end", "Tanggal selesai")
        return jsonify({"start": start.isoformat(), "end": end.isoformat(), "net_cash_flow": svc.net_cash_flow(start, end)})

    @app.route("/api/reports/weekly", methods=["GET"], endpoint="report_weekly")
    def report_weekly():
        week_start = date_field(dict(request.args), "week_start", "Awal minggu", required=False)
        if week_start is None:
            week_start, _ = week_range(_today())
        return jsonify(svc.weekly_report(week_start).to_dict())

    @app.route("/api/reports/productivity", methods=["GET"], endpoint="report_productivity")
    def report_productivity():
        period = require_period(request.args.get("period") or year_month(_today()))
        return jsonify([asdict(r) for r in svc.monthly_productivity(period)])

    @app.route("/api/reports/budget", methods=["GET"], endpoint="report_budget")
    def report_budget():
        return jsonify(svc.budget_utilization().to_dict())

    @app.route("/api/reports/dashboard", methods=["GET"], endpoint="report_dashboard")
    def report_dashboard():
        return jsonify(svc.dashboard(_today()))

    @app.route("/api/reports/integrity", methods=["GET"], endpoint="report_integrity")
    def report_integrity():
        return jsonify({"issues": svc.integrity_issues()})
