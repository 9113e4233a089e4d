"""Browser-independent helpers shared by the TodoMVC test suites."""
