from ga4report import GA4Reporter, ReportQuery

PROPERTY_ID = "123456789"

ga = GA4Reporter(PROPERTY_ID)

query = ReportQuery(
    start_date="2024-01-01",
    end_date="2024-01-31",
    dimensions=["country", "city"],
    metrics=["activeUsers", "sessions"],
    filters=[{"field": "country", "value": "United States"}],
    not_filters=[{"field": "city", "value": "(not set)"}],
    limit=20,
)

report = ga.run_report(query)
print(report["rowCount"])

active_users = ga.run_report_dataframe(query)
print(active_users.head())
