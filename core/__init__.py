"""Cookie Orders core - domain, application, data and infrastructure layers."""
