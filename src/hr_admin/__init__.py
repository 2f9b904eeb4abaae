"""HR admin package.

Accounts, departments and employees, plus department transfers and
equipment / leave requests with an approval status. Organized by feature
module with a thin Flask controller layer over service and repository layers;
repositories come in a MySQL flavour and a local key-value flavour.
"""

__version__ = "1.0.0"
