"""Sample products loaded into every new store."""

SEED_PRODUCTS = [
    {
        "id": 1,
        "title": "Classic Denim Jacket",
        "description": "A timeless denim jacket that never goes out of style",
        "price": 59.99,
        "discount_percentage": 10.5,
        "rating": 4.8,
        "stock": 45,
        "brand": "Levi's",
        "category": "clothing",
        "thumbnail": "https://i.dummyjson.com/data/products/1/thumbnail.jpg",
        "images": [
            "https://i.dummyjson.com/data/products/1/1.jpg",
            "https://i.dummyjson.com/data/products/1/2.jpg",
            "https://i.dummyjson.com/data/products/1/3.jpg",
        ],
    },
    {
        "id": 2,
        "title": "Designer Handbag",
        "description": "Elegant designer handbag with premium leather finish",
        "price": 129.99,
        "discount_percentage": 15,
        "rating": 4.6,
        "stock": 20,
        "brand": "Michael Kors",
        "category": "accessories",
        "thumbnail": "https://i.dummyjson.com/data/products/2/thumbnail.jpg",
        "images": [
            "https://i.dummyjson.com/data/products/2/1.jpg",
            "https://i.dummyjson.com/data/products/2/2.jpg",
        ],
    },
    {
        "id": 3,
        "title": "Running Shoes",
        "description": "Lightweight running shoes with cushioned soles",
        "price": 89.99,
        "discount_percentage": 5,
        "rating": 4.5,
        "stock": 30,
        "brand": "Nike",
        "category": "footwear",
        "thumbnail": "https://i.dummyjson.com/data/products/3/thumbnail.jpg",
        "images": [
            "https://i.dummyjson.com/data/products/3/1.jpg",
            "https://i.dummyjson.com/data/products/3/2.jpg",
            "https://i.dummyjson.com/data/products/3/3.jpg",
        ],
    },
    {
        "id": 4,
        "title": "Summer Dress",
        "description": "Light and flowy summer dress with floral pattern",
        "price": 45.99,
        "discount_percentage": 12,
        "rating": 4.7,
        "stock": 25,
        "brand": "Zara",
        "category": "clothing",
        "thumbnail": "https://i.dummyjson.com/data/products/4/thumbnail.jpg",
        "images": [
            "https://i.dummyjson.com/data/products/4/1.jpg",
            "https://i.dummyjson.com/data/products/4/2.jpg",
        ],
    },
    {
        "id": 5,
        "title": "Leather Wallet",
        "description": "Genuine leather wallet with multiple card slots",
        "price": 35.99,
        "discount_percentage": 8,
        "rating": 4.4,
        "stock": 50,
        "brand": "Fossil",
        "category": "accessories",
        "thumbnail": "https://i.dummyjson.com/data/products/5/thumbnail.jpg",
        "images": [
            "https://i.dummyjson.com/data/products/5/1.jpg",
        ],
    },
]
