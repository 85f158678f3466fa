"""Application layer - orchestration around the domain.

Contains the report-and-capture wrapper used wherever domain operations are
exercised on behalf of a reporter.
"""
