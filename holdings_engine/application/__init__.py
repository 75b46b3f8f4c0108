# holdings_engine/application/__init__.py

"""Holdings resolution stages and the service that runs them"""
