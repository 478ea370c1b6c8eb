"""Business logic for each feature area.

Routes stay thin: they parse the request, call into these modules and render
the result. Every storage error leaves this layer as a ``BudgetBookError``.
"""
