"""PizzaHub API: shops, pizzas, beverages and orders over a flat JSON store."""
