ORDERS = [
    {
        "id": "f6069a542257054114138301947672ba",
        "deliverTo": "1600 Pennsylvania Avenue NW, Washington, DC 20500",
        "mobileNumber": "(202) 456-1111",
        "status": "out-for-delivery",
        "dishes": [
            {
                "id": "90c3d873684bf381dfab29034b5bba73",
                "name": "Falafel and tahini bagel",
                "description": "A warm bagel filled with falafel and tahini",
                "image_url": "https://images.pexels.com/photos/4560606/pexels-photo-4560606.jpeg?h=530&w=350",
                "price": 6,
                "quantity": 1,
            },
        ],
    },
    {
        "id": "5a887d326e83d3c5bdcbee398ea32aff",
        "deliverTo": "308 Negra Arroyo Lane, Albuquerque, NM",
        "mobileNumber": "(505) 143-3369",
        "status": "delivered",
        "dishes": [
            {
                "id": "d351db2b49b69679504652ea1cf38241",
                "name": "Dolcelatte and chickpea spaghetti",
                "description": "Spaghetti topped with a blend of dolcelatte and fresh chickpeas",
                "image_url": "https://images.pexels.com/photos/1279330/pexels-photo-1279330.jpeg?h=530&w=350",
                "price": 19,
                "quantity": 2,
            },
        ],
    },
    {
        "id": "1c8e2d9b0a4f4e7c9a1b2c3d4e5f6a7b",
        "deliverTo": "221B Baker Street, London NW1 6XE",
        "mobileNumber": "(020) 7224-3688",
        "status": "pending",
        "dishes": [
            {
                "id": "3c637d011d844ebab1205fef8a7e36ea",
                "name": "Broccoli and beetroot stir fry",
                "description": "Crunchy stir fry featuring fresh broccoli and beetroot",
                "image_url": "https://images.pexels.com/photos/4144234/pexels-photo-4144234.jpeg?h=530&w=350",
                "price": 15,
                "quantity": 3,
            },
        ],
    },
]
