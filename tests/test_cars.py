import pytest

from racesim.cars import SUV, Car, Enduro, Overheated, SportsCar, TunedSportsCar


def test_new_cars_start_at_rest_with_their_tank():
    assert SUV("s").speed == 0
    assert SUV("s").fuel == 130
    assert Enduro("e").fuel == 130
    assert SportsCar("f").fuel == 100


def test_car_is_abstract():
    with pytest.raises(TypeError):
        Car("plain", 10)


def test_accelerate_adds_speed_and_burns_fuel():
    car = SUV("s")
    before = car.fuel
    car.accelerate(20)
    assert car.speed == 20
    assert before - car.fuel == pytest.approx(10)


def test_fuel_never_goes_negative():
    car = SportsCar("f")
    car.consume_fuel(1000)
    assert car.fuel == 0
    car.accelerate(50)
    assert car.fuel == 0


def test_overheats_only_above_limit():
    car = SportsCar("f")
    car.speed = 350
    car.accelerate(1)
    assert car.speed == 351
    with pytest.raises(Overheated):
        car.accelerate(1)
    assert car.speed == 351


def test_overheated_is_runtime_error():
    car = SUV("s")
    car.speed = 400
    with pytest.raises(RuntimeError, match="supraincalzit"):
        car.accelerate(5)


def test_tuned_sports_car_starts_moving():
    tuned = TunedSportsCar("t")
    plain = SportsCar("p")
    assert tuned.speed == 10
    assert tuned.fuel < plain.fuel


def test_scores_at_rest():
    assert SUV("s").score() == pytest.approx(52.0)
    assert Enduro("e").score() > SUV("s").score()


def test_score_grows_with_speed():
    for car in (SUV("a"), SportsCar("b"), Enduro("c"), TunedSportsCar("d")):
        before = car.score()
        car.accelerate(30)
        assert car.score() > before


def test_car_count_tracks_live_cars():
    before = Car.car_count()
    car = Enduro("e")
    other = SportsCar("f")
    assert Car.car_count() == before + 2
    del car
    assert Car.car_count() == before + 1
    del other
    assert Car.car_count() == before


def test_distance_is_shared_between_cars():
    before = Car.total_distance()
    SUV("a").add_distance(12.5)
    SportsCar("b").add_distance(7.5)
    assert Car.total_distance() == pytest.approx(before + 20.0)


def test_str_format():
    assert str(SportsCar("Ferrari")) == "Car: Ferrari  Spped: 0 fuel: 100"